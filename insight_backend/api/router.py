"""API router — aggregates all endpoint modules."""

from __future__ import annotations

from fastapi import APIRouter

from .content import router as content_router
from .health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(content_router)
