"""
Path overrides - Presentation Layer

Paths listed here answer 404 before routing or static file handling get a
chance to serve them.
"""

from typing import Iterable

from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send


class NotFoundPathMiddleware:
    """Pure ASGI middleware answering 404 for a fixed set of paths."""

    def __init__(self, app: ASGIApp, paths: Iterable[str] = ()) -> None:
        self.app = app
        self.paths = frozenset(paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"] in self.paths:
            response = PlainTextResponse("Not Found", status_code=404)
            await response(scope, receive, send)
            return
        await self.app(scope, receive, send)
