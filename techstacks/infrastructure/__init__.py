"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as relational
databases, caches, OAuth providers and third-party HTTP APIs.
"""

from techstacks.infrastructure import repositories

__all__ = ["repositories"]
