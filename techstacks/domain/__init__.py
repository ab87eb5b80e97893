"""
Domain Layer Package

This package contains the core entities and rules of TechStacks.
It defines entities, ports, repository contracts and validation
services without dependencies on external frameworks or infrastructure.
"""

# Re-export submodules
from techstacks.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
