"""Protocol API module: configuration, transport, requests and callbacks."""
from .config import (
    AuthConfig,
    TransportConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    DEFAULT_MODULUS,
    DEFAULT_EXPONENT,
    DEFAULT_USER_AGENT,
)
from .transport import Transport, TransportResponse, AiohttpTransport
from .request import RequestBuilder, ResponseParser, ResponseHandler
from .callbacks import (
    TokenCallback,
    MasterLoginCallback,
    AuthTokenCallback,
    FunctionCallback,
)

__all__ = [
    # Configuration
    'AuthConfig',
    'TransportConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_MODULUS',
    'DEFAULT_EXPONENT',
    'DEFAULT_USER_AGENT',

    # Transport
    'Transport',
    'TransportResponse',
    'AiohttpTransport',

    # Requests
    'RequestBuilder',
    'ResponseParser',
    'ResponseHandler',

    # Callbacks
    'TokenCallback',
    'MasterLoginCallback',
    'AuthTokenCallback',
    'FunctionCallback',
]
