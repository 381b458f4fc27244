"""Landing page and fallback routes.

``router`` holds ``GET /``. ``include_fallback_routes`` must run after every
other router is included: it answers ``OPTIONS`` on any path, then renders
the landing page for any method and path nothing else matched.
"""

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

LANDING_PAGE = """
<html>
  <head><title>Body Garage</title></head>
  <body>
    <h1>Welcome to Body Garage Server</h1>
    <p>Use Postman or frontend to access API routes.</p>
  </body>
</html>
"""

router = APIRouter(tags=["pages"])
fallback_router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
def landing_page():
    """Static landing page."""
    return HTMLResponse(LANDING_PAGE)


@fallback_router.options("/{path:path}", response_class=PlainTextResponse)
def preflight(path: str):
    """CORS preflight for any path."""
    return PlainTextResponse("")


def unmatched(request: Request) -> HTMLResponse:
    """Anything without its own route gets the landing page, whatever the method."""
    return HTMLResponse(LANDING_PAGE)


def include_fallback_routes(app: FastAPI) -> None:
    """Add the preflight and catch-all routes; call after every other router."""
    app.include_router(fallback_router)
    # A plain route with no method list matches every verb, custom ones included
    app.add_route("/{path:path}", unmatched, include_in_schema=False)
