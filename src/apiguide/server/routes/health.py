"""Health check endpoint."""

from fastapi import APIRouter

import apiguide

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": apiguide.__version__}
