"""
Main module - Main/Composition Root Layer

This module serves as the entry point for the application, orchestrating
the initialization and configuration of all other layers.

Its primary responsibilities include:
- Reading the runtime settings and the application settings source
- Configuring dependencies and services (Composition Root)
- Running the startup sequence and building the FastAPI application
"""

from .bootstrap import AppHost, BootstrapResult
from .config import AppConfig, RuntimeSettings, build_app_config, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppConfig",
    "AppContainer",
    "AppHost",
    "BootstrapResult",
    "RuntimeSettings",
    "build_app_config",
    "get_container",
    "get_settings",
    "init_container",
]
