"""
HTTP transport used by the protocol client.

The client only needs one capability: send a form-encoded POST and get back
the status code and the text body. Anything providing ``post_form`` can be
plugged in; ``AiohttpTransport`` is the default.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, runtime_checkable

import aiohttp

from .config import TransportConfig
from ..logging import get_logger


@dataclass(frozen=True)
class TransportResponse:
    """Status code and text body of a completed request."""
    status: int
    text: str


@runtime_checkable
class Transport(Protocol):
    """Protocol for transports able to POST a form."""

    async def post_form(
        self,
        url: str,
        form: Dict[str, str],
        headers: Dict[str, str]
    ) -> TransportResponse:
        """
        POST ``form`` as application/x-www-form-urlencoded.

        Args:
            url: Target URL
            form: Ordered form fields
            headers: Request headers

        Returns:
            TransportResponse with status and body

        Raises:
            Any exception on failure; the client wraps it in TransportError
        """
        ...


class AiohttpTransport:
    """
    Transport backed by aiohttp.

    A fresh session is opened for every request and closed afterwards, so
    no connection or handle outlives a call.
    """

    def __init__(self, config: Optional[TransportConfig] = None):
        self._config = config or TransportConfig.default()
        self._logger = get_logger('aiogpsoauth.transport')

    @property
    def config(self) -> TransportConfig:
        """Get current configuration."""
        return self._config

    async def post_form(
        self,
        url: str,
        form: Dict[str, str],
        headers: Dict[str, str]
    ) -> TransportResponse:
        connector = aiohttp.TCPConnector(**self._config.get_connector_kwargs())
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None

        async with aiohttp.ClientSession(
            connector=connector,
            **self._config.get_session_kwargs()
        ) as session:
            self._logger.debug(f"POST {url} ({len(form)} fields)")
            async with session.post(
                url,
                data=form,
                headers=headers,
                proxy=proxy
            ) as response:
                # Undecodable bytes must not mask the status check
                text = await response.text(errors='replace')
                self._logger.debug(f"Response status {response.status} from {url}")
                return TransportResponse(status=response.status, text=text)
