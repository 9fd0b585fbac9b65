"""Binary key struct for the service's RSA public key."""
from Crypto.Hash import SHA1
from Crypto.Util.number import long_to_bytes

# Length markers are fixed by the protocol, not computed from the key.
MODULUS_LENGTH_MARKER = b'\x00\x00\x00\x80'
EXPONENT_LENGTH_MARKER = b'\x00\x00\x00\x03'
FINGERPRINT_SIZE = 4


class KeyStructCodec:
    """Encodes an RSA public key into the protocol key struct."""

    @staticmethod
    def magnitude(value: int) -> bytes:
        """Returns the unsigned big-endian bytes of ``value``, without a sign byte."""
        if value <= 0:
            raise ValueError("Key struct integers must be positive")
        return long_to_bytes(value)

    @classmethod
    def encode(cls, modulus: int, exponent: int) -> bytes:
        """
        Builds the key struct.

        Layout: modulus length marker, modulus bytes, exponent length
        marker, exponent bytes.

        Args:
            modulus: RSA modulus
            exponent: RSA public exponent

        Returns:
            Encoded key struct
        """
        return b''.join((
            MODULUS_LENGTH_MARKER,
            cls.magnitude(modulus),
            EXPONENT_LENGTH_MARKER,
            cls.magnitude(exponent),
        ))

    @staticmethod
    def fingerprint(key_struct: bytes) -> bytes:
        """Returns the leading 4 bytes of the SHA-1 of a key struct."""
        return SHA1.new(key_struct).digest()[:FINGERPRINT_SIZE]
