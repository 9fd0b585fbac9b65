"""
Callback adapters for the non-blocking call style.

A submitted request is an ``asyncio.Task``; an adapter is attached as its
done callback and turns the generic completion into a typed success or
failure notification. Callbacks run on the event loop that owns the task.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from ..exceptions import GpsoauthError, TokenRequestFailed, TransportError
from ..logging import get_logger
from ..models import AuthToken, MasterToken

T = TypeVar('T')

logger = get_logger('aiogpsoauth.callbacks')


class TokenCallback(ABC, Generic[T]):
    """Receives the outcome of a submitted token request."""

    @abstractmethod
    def on_success(self, value: T) -> None:
        """Called with the token when the request succeeds."""
        pass

    @abstractmethod
    def on_failure(self, error: GpsoauthError) -> None:
        """Called with the error when the request fails or is cancelled."""
        pass

    def __call__(self, future: asyncio.Future) -> None:
        if future.cancelled():
            logger.debug("Token request cancelled")
            error = TransportError("Request cancelled")
            error.__cause__ = asyncio.CancelledError()
            self.on_failure(error)
            return

        exc = future.exception()
        if exc is None:
            self.on_success(future.result())
        elif isinstance(exc, GpsoauthError):
            self.on_failure(exc)
        else:
            error = TokenRequestFailed(f"Unexpected error: {exc!r}")
            error.__cause__ = exc
            self.on_failure(error)


class MasterLoginCallback(TokenCallback[MasterToken]):
    """Callback for master login requests."""


class AuthTokenCallback(TokenCallback[AuthToken]):
    """Callback for OAuth exchange and full login requests."""


class FunctionCallback(TokenCallback[T]):
    """Adapts a pair of plain callables."""

    def __init__(
        self,
        on_success: Callable[[T], None],
        on_failure: Callable[[GpsoauthError], None]
    ):
        self._on_success = on_success
        self._on_failure = on_failure

    def on_success(self, value: T) -> None:
        self._on_success(value)

    def on_failure(self, error: GpsoauthError) -> None:
        self._on_failure(error)
