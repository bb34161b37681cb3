from __future__ import annotations

from fastapi import APIRouter

from .routes import freesound


api_router = APIRouter()
api_router.include_router(freesound.router, prefix="/freesound", tags=["freesound"])
