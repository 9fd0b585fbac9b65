"""RSA key struct encoding and credential signing."""
from .key_struct import KeyStructCodec
from .signer import CredentialSigner

__all__ = [
    'KeyStructCodec',
    'CredentialSigner',
]
