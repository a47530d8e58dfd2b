"""Ping request and validation result models."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from app.services.mediator import Request


@dataclass(frozen=True)
class Ping(Request[str]):
    """Ask the service to reply with ``response_message``."""

    response_message: str | None = None


class ValidationFailure(BaseModel):
    """A single failed rule."""

    field: str
    message: str


class ValidationResult(BaseModel):
    errors: list[ValidationFailure] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
