"""Ping endpoints.

Both actions hand a ``Ping`` to the mediator; neither knows which handler
answers it.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import PlainTextResponse

from app.models.ping import Ping
from app.services.mediator import Mediator

router = APIRouter(prefix="/ping", tags=["ping"])


def get_mediator(request: Request) -> Mediator:
    """Mediator built at startup and stored on the application state."""
    return request.app.state.mediator


@router.get("", response_class=PlainTextResponse)
async def get_ping(mediator: Annotated[Mediator, Depends(get_mediator)]) -> str:
    return await mediator.send_async(Ping(response_message="Pong!"))


@router.post("", response_class=PlainTextResponse)
async def post_ping(
    mediator: Annotated[Mediator, Depends(get_mediator)],
    response_message: Annotated[str | None, Body()] = None,
) -> str:
    """Echo the JSON string in the request body."""
    return await mediator.send_async(Ping(response_message=response_message))
