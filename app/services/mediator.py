"""Mediator with a pipeline of behaviors.

Callers send a request object; the mediator finds the handler registered for
the request's type and runs it inside the registered behaviors.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")

NextHandler = Callable[[], Awaitable[Any]]


class HandlerNotFoundError(LookupError):
    """Raised when a request type has no registered handler."""


class Request(Generic[TResponse], ABC):
    """Base class for requests. ``TResponse`` is what the handler returns."""


class RequestHandler(Generic[TRequest, TResponse], ABC):
    @abstractmethod
    async def handle(self, request: TRequest) -> TResponse:
        pass


class PipelineBehavior(ABC):
    """Step executed around every dispatch.

    A behavior may inspect the request, call ``next_handler`` to continue the
    pipeline, or raise to stop it.
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler: NextHandler) -> Any:
        pass


class Mediator:
    def __init__(self):
        self._handlers: dict[type, Callable[[], RequestHandler]] = {}
        self._behaviors: list[PipelineBehavior] = []

    def register_handler(
        self, request_type: type, handler_factory: Callable[[], RequestHandler]
    ) -> None:
        """Register the factory building the handler for ``request_type``."""
        self._handlers[request_type] = handler_factory

    def register_behavior(self, behavior: PipelineBehavior) -> None:
        """Add a behavior. Behaviors run in registration order."""
        self._behaviors.append(behavior)

    async def send_async(self, request: Request[TResponse]) -> TResponse:
        """Send ``request`` through the behaviors to its handler.

        Raises:
            HandlerNotFoundError: If no handler is registered for the type.
        """
        request_type = type(request)
        handler_factory = self._handlers.get(request_type)
        if handler_factory is None:
            raise HandlerNotFoundError(
                f"No handler registered for {request_type.__name__}"
            )

        logger.debug("Dispatching %s", request_type.__name__)

        async def final_handler():
            return await handler_factory().handle(request)

        # Wrap in reverse so the first registered behavior runs outermost
        pipeline: NextHandler = final_handler
        for behavior in reversed(self._behaviors):
            pipeline = _bind(behavior, request, pipeline)

        return await pipeline()


def _bind(behavior: PipelineBehavior, request: Any, next_handler: NextHandler) -> NextHandler:
    async def step():
        return await behavior.handle(request, next_handler)

    return step
