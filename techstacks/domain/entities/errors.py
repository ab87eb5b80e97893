"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(DomainError):
    """Raised when a required setting is missing or unreadable."""


class EntityNotFoundError(DomainError):
    """Raised when a requested record or registration does not exist."""

    def __init__(
        self, entity: str, key: Any, details: Optional[Dict[str, Any]] = None
    ):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} '{key}' not found", details)


class AuthenticationError(DomainError):
    """Raised when an identity provider rejects or aborts a sign-in."""

    def __init__(
        self,
        message: str,
        reason: str = "Unknown",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.reason = reason
        super().__init__(message, details)


class RequestValidationError(DomainError):
    """Raised when a request fails one or more validation rules."""

    def __init__(self, errors: List[str], request_type: Optional[str] = None):
        self.errors = list(errors)
        details: Dict[str, Any] = {"errors": self.errors}
        if request_type:
            details["request_type"] = request_type
        super().__init__("Request validation failed.", details)
