"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from . import __version__
from .api.router import router
from .core.exceptions import setup_exception_handlers
from .core.settings import Settings
from .db.session import create_schema, make_engine, make_session_factory
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> FastAPI:
    """Build the app.

    With ``session_factory`` given (tests, embedding) the app uses it as-is
    and owns no engine; otherwise the lifespan creates and disposes one.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = None
        if app.state.session_factory is None:
            engine = make_engine(settings.database_url, echo=settings.sql_echo)
            if settings.is_dev:
                await create_schema(engine)
            app.state.session_factory = make_session_factory(engine)
        logger.info("insight backend started (env=%s)", settings.env)
        try:
            yield
        finally:
            if engine is not None:
                await engine.dispose()
                logger.info("engine disposed")

    app = FastAPI(title="Insight Backend", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = session_factory

    setup_exception_handlers(app)
    app.include_router(router)
    return app
