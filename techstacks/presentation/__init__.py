"""
Presentation Layer Package

This package contains the presentation layer components, which are
responsible for handling HTTP requests and responses: API routers,
server-rendered views, middleware and the request validators owned by the
host.
"""

from techstacks.presentation import controllers

__all__ = ["controllers"]
