"""Settings with local-dev-first defaults, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Settings:
    env: str = field(default_factory=lambda: os.getenv("INSIGHT_ENV", "dev"))
    host: str = field(default_factory=lambda: os.getenv("INSIGHT_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("INSIGHT_PORT", "8080")))

    database_url: str = field(
        default_factory=lambda: os.getenv(
            "INSIGHT_DATABASE_URL", "sqlite+aiosqlite:///./insight_dev.db"
        )
    )

    default_page_size: int = field(
        default_factory=lambda: int(os.getenv("INSIGHT_DEFAULT_PAGE_SIZE", "25"))
    )
    max_page_size: int = field(
        default_factory=lambda: int(os.getenv("INSIGHT_MAX_PAGE_SIZE", "100"))
    )

    log_level: str = field(default_factory=lambda: os.getenv("INSIGHT_LOG_LEVEL", "INFO"))
    sql_echo: bool = field(
        default_factory=lambda: os.getenv("INSIGHT_SQL_ECHO", "false").lower() == "true"
    )

    def __post_init__(self) -> None:
        if self.default_page_size < 1 or self.max_page_size < self.default_page_size:
            raise ValueError(
                "INSIGHT_DEFAULT_PAGE_SIZE must be >= 1 and <= INSIGHT_MAX_PAGE_SIZE"
            )

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"
