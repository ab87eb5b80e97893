"""
Request validation registry.

Validators are plain functions ``(request, errors) -> None`` that append a
message to ``errors`` for every rule the request breaks. Each module that
owns validators exposes a ``VALIDATORS`` sequence of ``(request_type,
validator)`` pairs, registered explicitly at startup.
"""

from typing import Any, Callable, Dict, Iterable, List, Tuple, Type

from techstacks.domain.entities.errors import RequestValidationError

Validator = Callable[[Any, List[str]], None]
ValidatorEntry = Tuple[Type[Any], Validator]


class ValidatorRegistry:
    """Maps request types to the validators that guard them."""

    def __init__(self) -> None:
        self._validators: Dict[Type[Any], List[Validator]] = {}

    def register(self, request_type: Type[Any], validator: Validator) -> None:
        validators = self._validators.setdefault(request_type, [])
        if validator not in validators:
            validators.append(validator)

    def register_all(self, entries: Iterable[ValidatorEntry]) -> None:
        for request_type, validator in entries:
            self.register(request_type, validator)

    def validators_for(self, request_type: Type[Any]) -> List[Validator]:
        return list(self._validators.get(request_type, []))

    @property
    def request_types(self) -> List[Type[Any]]:
        return list(self._validators)

    def validate(self, request: Any) -> None:
        """Run every validator registered for the request's type.

        Raises:
            RequestValidationError: If one or more validation rules fail.
        """
        errors: List[str] = []
        for validator in self.validators_for(type(request)):
            validator(request, errors)

        if errors:
            raise RequestValidationError(errors, type(request).__name__)
