# This project was developed with assistance from AI tools.
"""Liveness endpoint."""

from fastapi import APIRouter, Depends

from ..core.config import settings
from ..services.store import Store, get_store

router = APIRouter()


@router.get("/")
async def health(store: Store = Depends(get_store)) -> dict[str, str | int]:
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "offers": len(store.offers),
    }
