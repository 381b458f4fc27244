"""Request body decoding."""

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class DecodeError(Exception):
    """The request body is not a well-formed JSON object."""


async def decode_body(request: Request) -> dict[str, Any]:
    """Read the whole request body and parse it as a JSON object."""
    raw = await request.body()
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError("Invalid JSON") from e
    if not isinstance(data, dict):
        raise DecodeError("Invalid JSON")
    return data


def parse_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that decodes the body into ``model``.

    A field of the wrong type is a client error with its own message. Absent
    fields are left as None so handlers can report which ones are required.
    """

    async def dependency(request: Request) -> ModelT:
        data = await decode_body(request)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DecodeError("Invalid request fields") from e

    return dependency
