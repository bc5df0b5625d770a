"""Health check endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    db_ok = False
    try:
        async with request.app.state.session_factory() as session:
            await session.execute(text("SELECT 1"))
            db_ok = True
    except SQLAlchemyError:
        logger.warning("health check could not reach the database", exc_info=True)

    status = "ok" if db_ok else "degraded"
    return {"status": status, "db_ok": db_ok}
