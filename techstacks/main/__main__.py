"""
Main module entry point.

This allows running the web host as: python -m techstacks.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "techstacks.main.app:create_app",
        factory=True,
        host=settings.host.bind,
        port=settings.host.port,
        reload=settings.host.reload,
    )


if __name__ == "__main__":
    main()
