"""Request body parsing for the open-record POST endpoints.

Bodies are trusted as-is: a missing body, a non-JSON content type or a JSON
value that is not an object all become an empty record instead of a
validation error. Only unparseable JSON is rejected.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def _is_json(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def json_object(request: Request) -> dict[str, Any]:
    """The submitted JSON object, or ``{}`` when there is nothing usable."""
    if not _is_json(request):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON body")
    return data if isinstance(data, dict) else {}


def open_body(schema: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Dependency factory: parse the request into ``schema`` without rejecting it."""

    async def _parse(request: Request) -> ModelT:
        return schema.model_validate(await json_object(request))

    return _parse
