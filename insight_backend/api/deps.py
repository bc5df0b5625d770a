"""FastAPI dependency factories."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..content.model import ContentModel
from ..core.settings import Settings


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a read session; content queries never commit."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_content_model(session: AsyncSession = Depends(get_session)) -> ContentModel:
    return ContentModel(session)
