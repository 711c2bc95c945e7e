"""Request body decoding for the posts endpoints.

The body is read as JSON whatever the Content-Type header says. Only the
first JSON value is decoded; anything after it is ignored. Invalid UTF-8
bytes are replaced with U+FFFD before parsing.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

BodyModel = TypeVar("BodyModel", bound=BaseModel)

_decoder = json.JSONDecoder()


def decode_json_body(raw: bytes) -> Any:
    """Decode the first JSON value in a request body.

    Raises:
        RequestValidationError: If the body does not start with a JSON value
    """
    text = raw.decode("utf-8", "replace").lstrip()
    try:
        value, _ = _decoder.raw_decode(text)
    except json.JSONDecodeError as e:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", e.pos),
                    "msg": f"JSON decode error: {e.msg}",
                    "input": {},
                }
            ],
            body=raw,
        ) from e
    return value


def json_body(model: type[BodyModel]) -> Callable[[Request], Awaitable[BodyModel]]:
    """Build a dependency that decodes and validates the body as `model`."""

    async def dependency(request: Request) -> BodyModel:
        raw = await request.body()
        data = decode_json_body(raw)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            errors = [
                {**error, "loc": ("body", *error["loc"])}
                for error in e.errors(include_url=False)
            ]
            raise RequestValidationError(errors, body=data) from e

    return dependency


def request_body_schema(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI `requestBody` entry for a body decoded with `json_body`."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
