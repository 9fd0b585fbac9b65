"""
API configuration module.

``AuthConfig`` holds the protocol settings (service public key and user
agent). ``TransportConfig`` holds the HTTP settings of the default aiohttp
transport.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import ssl

# Google's published public key for the EncryptedPasswd field. Not a secret.
DEFAULT_MODULUS = int(
    '1419561962579347701879255618043598209714482723509830184360931738978554845107822'
    '0792069728505964824315287854252051465897172022852427630432232132589616397743585'
    '2395272134149378260200371457183474602754725451457370420041505749329659663863538'
    '423736961928495802209949126722610439862310060378247113201580053877385209'
)
DEFAULT_EXPONENT = 65537
DEFAULT_USER_AGENT = 'gpsoauth'

# The key struct announces a 128 byte modulus.
KEY_SIZE_BYTES = 128


@dataclass(frozen=True)
class AuthConfig:
    """
    Protocol configuration.

    One instance per client, read-only after construction and safe to share
    between concurrent calls.
    """
    modulus: int = DEFAULT_MODULUS
    exponent: int = DEFAULT_EXPONENT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if self.modulus <= 0 or (self.modulus.bit_length() + 7) // 8 != KEY_SIZE_BYTES:
            raise ValueError(
                f"Modulus must be {KEY_SIZE_BYTES * 8} bits, "
                f"got {self.modulus.bit_length()}"
            )
        if self.exponent <= 0:
            raise ValueError("Exponent must be positive")

    @classmethod
    def default(cls) -> 'AuthConfig':
        """Create default configuration with the bundled public key."""
        return cls()


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password and '://' in self.url:
            protocol, rest = self.url.split('://', 1)
            return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self):
        """Create SSL context from configuration (False disables verification)."""
        if not self.verify:
            return False

        context = ssl.create_default_context()
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        context.check_hostname = self.check_hostname
        return context


@dataclass
class TimeoutConfig:
    """Timeout configuration, in seconds."""
    total: float = 60.0
    connect: float = 15.0
    sock_read: float = 30.0

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass
class TransportConfig:
    """
    Configuration of the default aiohttp transport.

    Retries are deliberately absent: every failure is reported to the caller.
    """
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    extra_headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> 'TransportConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'TransportConfig':
        """Create configuration with proxy."""
        return cls(proxy=ProxyConfig(url=proxy_url), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'TransportConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False, check_hostname=False), **kwargs)

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'headers': dict(self.extra_headers),
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
