"""Domain services package."""

from .validation import Validator, ValidatorEntry, ValidatorRegistry

__all__ = ["Validator", "ValidatorEntry", "ValidatorRegistry"]
