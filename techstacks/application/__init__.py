"""
Application Layer Package

This package contains the application-specific rules and use cases.
It orchestrates the flow of data between the domain entities and the
infrastructure adapters: sitemap building, query-by-convention and
external identity provider sign-in.
"""

# Re-export submodules
from techstacks.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
