"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from account_service.api import auth, pages, users
from account_service.api.errors import setup_error_handling
from account_service.config import get_settings
from account_service.context import AppContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect and create the schema before serving; drain the pool on shutdown."""
    context = AppContext.create(get_settings())
    try:
        context.start()
    except Exception:
        context.close()
        raise
    app.state.context = context
    yield
    context.close()


app = FastAPI(
    title="Body Garage API",
    description="User account registration, login and administration",
    version="0.1.0",
    lifespan=lifespan,
)

setup_error_handling(app)

# Register routers; the fallback router must stay last
app.include_router(pages.router)
app.include_router(auth.router)
app.include_router(users.router)
pages.include_fallback_routes(app)


def run() -> None:
    """Start the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Starting server on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
