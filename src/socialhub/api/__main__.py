"""
socialhub.api.__main__

Entrypoint for `python -m socialhub.api`.
"""

from __future__ import annotations

import uvicorn

from socialhub.api.app import create_app
from socialhub.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Uvicorn's own log config is disabled so structlog owns every log line.
