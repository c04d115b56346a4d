"""
Run the auth backend: python -m profile_auth.server
"""

import logging

import uvicorn

from profile_auth.config import get_settings
from profile_auth.server.app import create_app


def main():
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    uvicorn.run(
        create_app(settings),
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
