"""Shared utilities for the crypto module."""
from .encoding import Base64Encoder

__all__ = [
    'Base64Encoder',
]
