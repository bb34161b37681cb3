from __future__ import annotations

from pydantic import BaseModel, ValidationError

from ..core.errors import ResponseDecodeError
from ..schemas.freesound import SearchResponse, Sound


def _as_text(payload: str | bytes) -> str:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload


def _decode(cls: type[BaseModel], payload: str | bytes, what: str):
    try:
        return cls.model_validate_json(payload)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Invalid {what} response: {e.error_count()} error(s): {e.errors()[0]['msg']}",
            body=_as_text(payload),
        ) from e


def decode_sound(payload: str | bytes) -> Sound:
    return _decode(Sound, payload, "sound")


def decode_search_response(payload: str | bytes) -> SearchResponse:
    return _decode(SearchResponse, payload, "search")
