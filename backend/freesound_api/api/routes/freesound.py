from __future__ import annotations

from fastapi import APIRouter, Header, HTTPException, Query

from ...core.errors import FreesoundAuthError, FreesoundError, FreesoundTransportError
from ...schemas.freesound import SearchResponse, SortOption, Sound
from ...services.freesound_client import FreesoundClient
from ...services.query_builder import SearchQueryBuilder


router = APIRouter()


def _split(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def _to_http_error(e: FreesoundError) -> HTTPException:
    if isinstance(e, FreesoundAuthError):
        return HTTPException(status_code=401, detail=str(e))
    if isinstance(e, FreesoundTransportError):
        return HTTPException(status_code=502, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


@router.get("/search", response_model=SearchResponse)
async def search(
    q: str | None = Query(default=None),
    filter: str | None = Query(default=None),
    sort: SortOption | None = Query(default=None),
    group_by_pack: bool | None = Query(default=None),
    page: int | None = Query(default=None),
    page_size: int | None = Query(default=None),
    fields: str | None = Query(default=None),
    descriptors: str | None = Query(default=None),
    normalized: bool | None = Query(default=None),
    x_freesound_token: str | None = Header(default=None),
) -> SearchResponse:
    builder = SearchQueryBuilder()
    if q is not None:
        builder.query(q)
    if filter is not None:
        builder.filter(filter)
    if sort is not None:
        builder.sort(sort)
    if group_by_pack is not None:
        builder.group_by_pack(group_by_pack)
    if page is not None:
        builder.page(page)
    if page_size is not None:
        builder.page_size(page_size)
    if fields is not None:
        builder.fields(_split(fields) or [])
    if descriptors is not None:
        builder.descriptors(_split(descriptors) or [])
    if normalized is not None:
        builder.normalized(normalized)

    try:
        async with FreesoundClient(api_key=x_freesound_token) as client:
            return await client.search(builder.build())
    except FreesoundError as e:
        raise _to_http_error(e) from e


@router.get("/sounds/{sound_id}", response_model=Sound)
async def get_sound(
    sound_id: int,
    descriptors: str | None = Query(default=None),
    normalized: bool | None = Query(default=None),
    x_freesound_token: str | None = Header(default=None),
) -> Sound:
    try:
        async with FreesoundClient(api_key=x_freesound_token) as client:
            return await client.get_sound(
                sound_id,
                descriptors=_split(descriptors),
                normalized=normalized,
            )
    except FreesoundError as e:
        raise _to_http_error(e) from e


@router.get("/token/check")
async def check_token(x_freesound_token: str | None = Header(default=None)) -> dict:
    try:
        async with FreesoundClient(api_key=x_freesound_token) as client:
            await client.test_api_key()
    except FreesoundError as e:
        raise _to_http_error(e) from e
    return {"valid": True}
