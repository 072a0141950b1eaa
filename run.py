"""Entry point for serving the Arsatoll API.

Host and port are read from the environment variables ``API_HOST``
and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``).  All other
configuration is read by ``arsatoll_api.app.core.config``.

Usage:
    python run.py
"""
import os

import uvicorn

from arsatoll_api.app.core.config import settings


def main() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    uvicorn.run(
        "arsatoll_api.app.main:app",
        host=host,
        port=port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
