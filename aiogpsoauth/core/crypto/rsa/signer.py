"""Encrypted password blob for the master login."""
from Crypto.Cipher import PKCS1_OAEP
from Crypto.Hash import SHA1
from Crypto.PublicKey import RSA

from .key_struct import KeyStructCodec
from ..utils.encoding import Base64Encoder
from ...exceptions import CryptoUnavailable

SIGNATURE_VERSION = b'\x00'


class CredentialSigner:
    """
    Builds the EncryptedPasswd value of the master login.

    The signature is ``0x00 || fingerprint(key struct) || OAEP(user \\0 pass)``
    with SHA-1 as both the OAEP and MGF1 hash. Instances hold no state and
    can be shared between concurrent callers.
    """

    def __init__(self, codec: KeyStructCodec = None):
        self.codec = codec or KeyStructCodec()
        self.encoder = Base64Encoder()

    @staticmethod
    def build_public_key(modulus: int, exponent: int) -> RSA.RsaKey:
        """Constructs the RSA public key, raising CryptoUnavailable if invalid."""
        try:
            return RSA.construct((modulus, exponent))
        except (ValueError, TypeError) as e:
            raise CryptoUnavailable(f"Cannot construct RSA public key: {e}") from e

    def sign(self, username: str, password: str, modulus: int, exponent: int) -> bytes:
        """
        Encrypts the credentials under the service public key.

        Args:
            username: Account email
            password: Account password
            modulus: RSA modulus of the service key
            exponent: RSA public exponent of the service key

        Returns:
            Raw signature bytes

        Raises:
            CryptoUnavailable: If the key is unusable or encryption fails
        """
        key_struct = self.codec.encode(modulus, exponent)
        fingerprint = self.codec.fingerprint(key_struct)
        cipher = PKCS1_OAEP.new(self.build_public_key(modulus, exponent), hashAlgo=SHA1)
        try:
            plaintext = username.encode('utf-8') + b'\x00' + password.encode('utf-8')
            ciphertext = cipher.encrypt(plaintext)
        except (ValueError, TypeError) as e:
            raise CryptoUnavailable(f"Cannot encrypt credentials: {e}") from e

        return SIGNATURE_VERSION + fingerprint + ciphertext

    def sign_encoded(self, username: str, password: str, modulus: int, exponent: int) -> str:
        """Same as :meth:`sign`, encoded as unpadded Base64 URL-safe."""
        return self.encoder.encode(self.sign(username, password, modulus, exponent))
