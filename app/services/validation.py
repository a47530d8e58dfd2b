"""Validation pipeline behavior.

Runs every validator registered for a request's type before the handler and
aborts the dispatch with ``ValidationException`` when any rule fails.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from app.models.ping import ValidationFailure, ValidationResult
from app.services.mediator import NextHandler, PipelineBehavior

logger = logging.getLogger(__name__)

TRequest = TypeVar("TRequest")


class ValidationException(Exception):
    """One or more validation rules failed for a request."""

    def __init__(self, errors: list[ValidationFailure]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))

    def to_dict(self) -> dict[str, list[str]]:
        """Group failure messages by field."""
        grouped: dict[str, list[str]] = {}
        for failure in self.errors:
            grouped.setdefault(failure.field, []).append(failure.message)
        return grouped


class Validator(Generic[TRequest], ABC):
    @abstractmethod
    def validate(self, request: TRequest) -> ValidationResult:
        pass


class ValidationBehavior(PipelineBehavior):
    def __init__(self):
        self._validators: dict[type, list[Validator]] = {}

    def register_validator(self, request_type: type, validator: Validator) -> None:
        self._validators.setdefault(request_type, []).append(validator)

    async def handle(self, request: Any, next_handler: NextHandler) -> Any:
        validators = self._validators.get(type(request), [])

        errors: list[ValidationFailure] = []
        for validator in validators:
            errors.extend(validator.validate(request).errors)

        if errors:
            logger.warning(
                f"Validation failed for {type(request).__name__}",
                extra={"fields": sorted({e.field for e in errors})},
            )
            raise ValidationException(errors)

        return await next_handler()
