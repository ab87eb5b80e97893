"""Domain port for leasing database connections."""

from __future__ import annotations

from typing import Any, ContextManager, Protocol


class IDbConnectionFactory(Protocol):
    """Hands out scoped connections; the lease ends when the context exits."""

    def open_connection(self) -> ContextManager[Any]:
        ...
