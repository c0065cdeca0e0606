from __future__ import annotations

from fastapi import APIRouter

from app.theme import THEMES

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, object]:
    return {"status": "ok", "themes": len(THEMES)}
