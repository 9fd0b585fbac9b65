"""
aiogpsoauth - Async Python client for the Android device-authentication protocol.

Usage:
    >>> from aiogpsoauth import GpsoauthClient
    >>>
    >>> client = GpsoauthClient()
    >>> token = await client.login(email, password, android_id,
    ...                            service, app, client_sig)
    >>> print(token.expiry)
"""
import logging
from .client import GpsoauthClient

# Configuration
from .core.api import (
    AuthConfig,
    TransportConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    Transport,
    TransportResponse,
    AiohttpTransport,
    TokenCallback,
    MasterLoginCallback,
    AuthTokenCallback,
    FunctionCallback,
)

# Models and results
from .core.models import (
    AuthToken,
    Credentials,
    DeviceContext,
    MasterToken,
    ServiceRequest,
)
from .core.result import Result, Success, Failure

# Errors
from .core.exceptions import (
    GpsoauthError,
    CryptoUnavailable,
    TokenRequestFailed,
    TransportError,
    UnexpectedStatus,
    MalformedResponse,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for aiogpsoauth modules.

    Log records never contain passwords or tokens.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'aiogpsoauth',
        'aiogpsoauth.client',
        'aiogpsoauth.transport',
        'aiogpsoauth.callbacks',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'GpsoauthClient',
    'AuthConfig',
    'TransportConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'Transport',
    'TransportResponse',
    'AiohttpTransport',
    'TokenCallback',
    'MasterLoginCallback',
    'AuthTokenCallback',
    'FunctionCallback',
    'AuthToken',
    'Credentials',
    'DeviceContext',
    'MasterToken',
    'ServiceRequest',
    'Result',
    'Success',
    'Failure',
    'GpsoauthError',
    'CryptoUnavailable',
    'TokenRequestFailed',
    'TransportError',
    'UnexpectedStatus',
    'MalformedResponse',
    'setup_logging',
]
