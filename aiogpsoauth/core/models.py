"""
Protocol data models.

All models are immutable and created per call. None of them is cached.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

DEFAULT_COUNTRY = 'us'
DEFAULT_LANG = 'en'
DEFAULT_SDK_VERSION = '17'
DEFAULT_MASTER_SERVICE = 'ac2dm'


@dataclass(frozen=True)
class Credentials:
    """
    Raw account credentials.

    Only used while the master login request is being built.
    """
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class DeviceContext:
    """
    Device metadata sent with every request.

    Attributes:
        android_id: Device identifier, opaque to this library
        device_country: Country of the device
        operator_country: Country of the network operator
        lang: Device language
        sdk_version: Android SDK version reported to the server
    """
    android_id: str
    device_country: str = DEFAULT_COUNTRY
    operator_country: str = DEFAULT_COUNTRY
    lang: str = DEFAULT_LANG
    sdk_version: str = DEFAULT_SDK_VERSION


@dataclass(frozen=True)
class ServiceRequest:
    """
    Target of the OAuth exchange.

    Attributes:
        service: Service scope being requested (e.g. ``oauth2:...``)
        app: Package name of the calling application
        client_sig: SHA-1 of the calling application's signing certificate
    """
    service: str
    app: str
    client_sig: str


@dataclass(frozen=True)
class MasterToken:
    """Long-lived master token returned by the master login."""
    token: str

    def __repr__(self) -> str:
        return "MasterToken(token='***')"

    __str__ = __repr__

    @classmethod
    def coerce(cls, value: Union['MasterToken', str]) -> 'MasterToken':
        """Accepts either a MasterToken or the raw token string."""
        if isinstance(value, MasterToken):
            return value
        return cls(value)


@dataclass(frozen=True)
class AuthToken:
    """
    Short-lived, service-scoped token returned by the OAuth exchange.

    Attributes:
        token: Opaque bearer token
        expiry: Expiry time in seconds since the epoch
    """
    token: str
    expiry: int

    @property
    def expires_at(self) -> datetime:
        """
        Expiry as an aware UTC datetime.

        Raises:
            OverflowError or ValueError if the expiry is beyond the range of
            ``datetime``; :meth:`is_expired` works for any expiry.
        """
        return datetime.fromtimestamp(self.expiry, tz=timezone.utc)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Checks whether the token has expired at ``now`` (default: current time)."""
        now = now or datetime.now(timezone.utc)
        return now.timestamp() >= self.expiry

    def __str__(self) -> str:
        return (
            "AuthToken{\n"
            f"   token='{self.token}',\n"
            f"   expiry={self.expiry}\n"
            "}"
        )
