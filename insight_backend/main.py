from __future__ import annotations

import uvicorn

from .app import create_app
from .core.settings import Settings

app = create_app()


def main() -> None:
    settings = Settings()
    uvicorn.run("insight_backend.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
