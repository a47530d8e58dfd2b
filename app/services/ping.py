"""Ping handler and validator, plus the mediator wiring for them."""

from app.models.ping import Ping, ValidationFailure, ValidationResult
from app.services.mediator import Mediator, RequestHandler
from app.services.validation import ValidationBehavior, Validator

MAX_RESPONSE_MESSAGE_LENGTH = 512

EMPTY_MESSAGE = "We need to know what you want from us"
TOO_LONG_MESSAGE = (
    f"We will not reply with more than {MAX_RESPONSE_MESSAGE_LENGTH} characters"
)


class PingHandler(RequestHandler[Ping, str]):
    """Replies with the message it was given."""

    async def handle(self, request: Ping) -> str:
        return request.response_message


class PingValidator(Validator[Ping]):
    """The message must be present and at most 512 characters.

    The length rule only runs once the message is known to be non-empty, so a
    missing message yields a single failure.
    """

    field = "response_message"

    def validate(self, request: Ping) -> ValidationResult:
        message = request.response_message

        if message is None or not message.strip():
            return ValidationResult(
                errors=[ValidationFailure(field=self.field, message=EMPTY_MESSAGE)]
            )

        if len(message) > MAX_RESPONSE_MESSAGE_LENGTH:
            return ValidationResult(
                errors=[ValidationFailure(field=self.field, message=TOO_LONG_MESSAGE)]
            )

        return ValidationResult()


def build_mediator() -> Mediator:
    """Register the Ping handler and the validation behavior."""
    validation = ValidationBehavior()
    validation.register_validator(Ping, PingValidator())

    mediator = Mediator()
    mediator.register_behavior(validation)
    mediator.register_handler(Ping, PingHandler)
    return mediator
