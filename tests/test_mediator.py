"""Mediator and pipeline behavior tests.

Tests cover:
    - Requests reach the handler registered for their type
    - Behaviors run in registration order, around the handler
    - Unregistered request types raise HandlerNotFoundError
    - ValidationBehavior stops the pipeline before the handler
"""

from dataclasses import dataclass

import pytest

from app.models.ping import Ping, ValidationFailure, ValidationResult
from app.services.mediator import (
    HandlerNotFoundError,
    Mediator,
    PipelineBehavior,
    Request,
    RequestHandler,
)
from app.services.ping import EMPTY_MESSAGE, PingHandler, build_mediator
from app.services.validation import ValidationBehavior, ValidationException, Validator


@dataclass(frozen=True)
class Add(Request[int]):
    a: int
    b: int


class AddHandler(RequestHandler[Add, int]):
    calls = 0

    async def handle(self, request: Add) -> int:
        AddHandler.calls += 1
        return request.a + request.b


class RecordingBehavior(PipelineBehavior):
    def __init__(self, name: str, log: list[str]):
        self.name = name
        self.log = log

    async def handle(self, request, next_handler):
        self.log.append(f"{self.name}:before")
        response = await next_handler()
        self.log.append(f"{self.name}:after")
        return response


class NegativeValidator(Validator[Add]):
    def validate(self, request: Add) -> ValidationResult:
        errors = [
            ValidationFailure(field=name, message=f"{name} must not be negative")
            for name in ("a", "b")
            if getattr(request, name) < 0
        ]
        return ValidationResult(errors=errors)


@pytest.fixture(autouse=True)
def reset_calls():
    AddHandler.calls = 0


@pytest.mark.asyncio
async def test_send_routes_to_registered_handler():
    mediator = Mediator()
    mediator.register_handler(Add, AddHandler)

    assert await mediator.send_async(Add(a=2, b=3)) == 5


@pytest.mark.asyncio
async def test_behaviors_run_in_registration_order():
    log: list[str] = []
    mediator = Mediator()
    mediator.register_behavior(RecordingBehavior("outer", log))
    mediator.register_behavior(RecordingBehavior("inner", log))
    mediator.register_handler(Add, AddHandler)

    await mediator.send_async(Add(a=1, b=1))

    assert log == ["outer:before", "inner:before", "inner:after", "outer:after"]


@pytest.mark.asyncio
async def test_unregistered_request_raises():
    mediator = Mediator()

    with pytest.raises(HandlerNotFoundError, match="Add"):
        await mediator.send_async(Add(a=1, b=1))


@pytest.mark.asyncio
async def test_validation_failure_skips_handler():
    validation = ValidationBehavior()
    validation.register_validator(Add, NegativeValidator())
    mediator = Mediator()
    mediator.register_behavior(validation)
    mediator.register_handler(Add, AddHandler)

    with pytest.raises(ValidationException) as exc_info:
        await mediator.send_async(Add(a=-1, b=-2))

    assert AddHandler.calls == 0
    assert exc_info.value.to_dict() == {
        "a": ["a must not be negative"],
        "b": ["b must not be negative"],
    }


@pytest.mark.asyncio
async def test_request_without_validators_passes_through():
    validation = ValidationBehavior()
    validation.register_validator(Ping, NegativeValidator())
    mediator = Mediator()
    mediator.register_behavior(validation)
    mediator.register_handler(Add, AddHandler)

    assert await mediator.send_async(Add(a=-1, b=0)) == -1


@pytest.mark.asyncio
async def test_ping_handler_echoes_message():
    assert await PingHandler().handle(Ping(response_message="hello")) == "hello"


@pytest.mark.asyncio
async def test_built_mediator_validates_ping():
    mediator = build_mediator()

    assert await mediator.send_async(Ping(response_message="Pong!")) == "Pong!"
    with pytest.raises(ValidationException) as exc_info:
        await mediator.send_async(Ping(response_message=""))
    assert exc_info.value.to_dict() == {"response_message": [EMPTY_MESSAGE]}
