"""Encoding utilities."""
import base64


class Base64Encoder:
    """Base64 URL-safe encoder/decoder used for the EncryptedPasswd field."""

    @staticmethod
    def encode(data: bytes) -> str:
        """Encodes bytes to Base64 URL-safe without padding."""
        return base64.urlsafe_b64encode(data).decode('ascii').rstrip('=')

    @staticmethod
    def decode(data: str) -> bytes:
        """Decodes Base64 URL-safe (with or without padding)."""
        data = data.strip()
        missing = -len(data) % 4
        return base64.urlsafe_b64decode(data + '=' * missing)
