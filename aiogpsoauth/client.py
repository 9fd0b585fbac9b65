"""
GpsoauthClient - async client for the Android device-authentication protocol.

Example:
    >>> client = GpsoauthClient()
    >>> master = await client.master_login(email, password, android_id)
    >>> token = await client.oauth_exchange(
    ...     email, master, android_id,
    ...     service='oauth2:https://www.googleapis.com/auth/drive',
    ...     app='com.google.android.apps.docs',
    ...     client_sig='38918a453d07199354f8b19af05ec6562ced5788'
    ... )
    >>> token.token, token.expiry

Every coroutine has a blocking twin (``*_sync``) and a non-blocking twin
(``submit_*``) returning an ``asyncio.Task`` with an optional typed
callback attached.
"""
import asyncio
from typing import Dict, Optional, Union

from .core.api import (
    AuthConfig,
    Transport,
    TransportResponse,
    AiohttpTransport,
    RequestBuilder,
    ResponseHandler,
    TokenCallback,
)
from .core.exceptions import GpsoauthError, TransportError
from .core.logging import get_logger
from .core.models import (
    AuthToken,
    Credentials,
    DeviceContext,
    MasterToken,
    ServiceRequest,
    DEFAULT_COUNTRY,
    DEFAULT_LANG,
    DEFAULT_MASTER_SERVICE,
    DEFAULT_SDK_VERSION,
)
from .core.utils import run_sync

logger = get_logger('aiogpsoauth.client')


class GpsoauthClient:
    """
    Performs the master login and the OAuth exchange.

    The client keeps no state between calls besides its configuration and
    transport, so one instance can serve concurrent callers. Nothing is
    retried; every failure is raised to the caller.
    """

    AUTH_URL = 'https://android.clients.google.com/auth'

    def __init__(
        self,
        config: Optional[AuthConfig] = None,
        transport: Optional[Transport] = None
    ):
        """
        Initialize the client.

        Args:
            config: Protocol configuration (bundled public key if not provided)
            transport: HTTP transport (aiohttp based if not provided)
        """
        self._config = config or AuthConfig.default()
        self._transport = transport or AiohttpTransport()
        self._builder = RequestBuilder(self._config)
        self._responses = ResponseHandler()

    @property
    def config(self) -> AuthConfig:
        """Get current configuration."""
        return self._config

    async def _post(self, form: Dict[str, str]) -> TransportResponse:
        """
        Sends a form to the auth endpoint, wrapping transport failures.

        Errors already in the GpsoauthError taxonomy pass through unchanged.
        ``asyncio.CancelledError`` is a BaseException and is never wrapped.
        """
        try:
            return await self._transport.post_form(
                self.AUTH_URL,
                form,
                self._builder.build_headers()
            )
        except GpsoauthError:
            raise
        except Exception as e:
            logger.debug(f"Transport failure: {e!r}")
            raise TransportError(f"Request to {self.AUTH_URL} failed: {e}") from e

    async def master_login(
        self,
        username: str,
        password: str,
        android_id: str,
        service: str = DEFAULT_MASTER_SERVICE,
        device_country: str = DEFAULT_COUNTRY,
        operator_country: str = DEFAULT_COUNTRY,
        lang: str = DEFAULT_LANG,
        sdk_version: str = DEFAULT_SDK_VERSION
    ) -> MasterToken:
        """
        Exchange account credentials for a master token.

        Args:
            username: Account email
            password: Account password
            android_id: Device identifier
            service: Service of the master login
            device_country: Device country code
            operator_country: Operator country code
            lang: Device language
            sdk_version: Android SDK version

        Returns:
            MasterToken

        Raises:
            CryptoUnavailable: If the password cannot be encrypted
            TransportError: If the request could not be sent
            UnexpectedStatus: If the server answers with a non-200 status
            MalformedResponse: If the response has no ``Token`` field
        """
        device = DeviceContext(
            android_id=android_id,
            device_country=device_country,
            operator_country=operator_country,
            lang=lang,
            sdk_version=sdk_version
        )
        form = self._builder.master_login_form(
            Credentials(username, password), device, service
        )

        logger.debug(f"Master login for {username} (service={service})")
        response = await self._post(form)
        master_token = self._responses.master_token(response)
        logger.info(f"Master login succeeded for {username}")
        return master_token

    async def oauth_exchange(
        self,
        username: str,
        master_token: Union[MasterToken, str],
        android_id: str,
        service: str,
        app: str,
        client_sig: str,
        device_country: str = DEFAULT_COUNTRY,
        operator_country: str = DEFAULT_COUNTRY,
        lang: str = DEFAULT_LANG,
        sdk_version: str = DEFAULT_SDK_VERSION
    ) -> AuthToken:
        """
        Exchange a master token for a service-scoped auth token.

        Args:
            username: Account email
            master_token: Token returned by :meth:`master_login`
            android_id: Device identifier
            service: Requested service scope
            app: Package name of the calling application
            client_sig: SHA-1 of the application's signing certificate
            device_country: Device country code
            operator_country: Operator country code
            lang: Device language
            sdk_version: Android SDK version

        Returns:
            AuthToken with token and expiry

        Raises:
            TransportError: If the request could not be sent
            UnexpectedStatus: If the server answers with a non-200 status
            MalformedResponse: If ``Auth`` or ``Expiry`` is missing or invalid
        """
        device = DeviceContext(
            android_id=android_id,
            device_country=device_country,
            operator_country=operator_country,
            lang=lang,
            sdk_version=sdk_version
        )
        form = self._builder.oauth_form(
            username,
            MasterToken.coerce(master_token),
            device,
            ServiceRequest(service=service, app=app, client_sig=client_sig)
        )

        logger.debug(f"OAuth exchange for {username} (service={service}, app={app})")
        response = await self._post(form)
        auth_token = self._responses.auth_token(response)
        logger.info(f"OAuth exchange succeeded for {username}, expires {auth_token.expiry}")
        return auth_token

    async def login(
        self,
        username: str,
        password: str,
        android_id: str,
        service: str,
        app: str,
        client_sig: str
    ) -> AuthToken:
        """Master login followed by the OAuth exchange."""
        master_token = await self.master_login(username, password, android_id)
        return await self.oauth_exchange(
            username, master_token, android_id, service, app, client_sig
        )

    # Blocking variants

    def master_login_sync(self, *args, **kwargs) -> MasterToken:
        """Blocking :meth:`master_login`."""
        return run_sync(lambda: self.master_login(*args, **kwargs))

    def oauth_exchange_sync(self, *args, **kwargs) -> AuthToken:
        """Blocking :meth:`oauth_exchange`."""
        return run_sync(lambda: self.oauth_exchange(*args, **kwargs))

    def login_sync(self, *args, **kwargs) -> AuthToken:
        """Blocking :meth:`login`."""
        return run_sync(lambda: self.login(*args, **kwargs))

    # Non-blocking variants

    @staticmethod
    def _submit(coro, callback: Optional[TokenCallback]) -> asyncio.Task:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        if callback is not None:
            task.add_done_callback(callback)
        return task

    def submit_master_login(
        self,
        *args,
        callback: Optional[TokenCallback[MasterToken]] = None,
        **kwargs
    ) -> asyncio.Task:
        """Schedule :meth:`master_login` on the running loop."""
        return self._submit(self.master_login(*args, **kwargs), callback)

    def submit_oauth_exchange(
        self,
        *args,
        callback: Optional[TokenCallback[AuthToken]] = None,
        **kwargs
    ) -> asyncio.Task:
        """Schedule :meth:`oauth_exchange` on the running loop."""
        return self._submit(self.oauth_exchange(*args, **kwargs), callback)

    def submit_login(
        self,
        *args,
        callback: Optional[TokenCallback[AuthToken]] = None,
        **kwargs
    ) -> asyncio.Task:
        """Schedule :meth:`login` on the running loop."""
        return self._submit(self.login(*args, **kwargs), callback)
