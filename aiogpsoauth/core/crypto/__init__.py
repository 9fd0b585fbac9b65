"""Crypto module: credential encryption for the master login."""
from .utils import Base64Encoder
from .rsa import KeyStructCodec, CredentialSigner

__all__ = [
    'Base64Encoder',
    'KeyStructCodec',
    'CredentialSigner',
]
