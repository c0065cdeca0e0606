from __future__ import annotations

from fastapi import APIRouter

from app.api.routers import themes

router = APIRouter(prefix="/api/v1")
router.include_router(themes.router)
