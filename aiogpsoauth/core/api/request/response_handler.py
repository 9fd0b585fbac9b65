"""Response parsing for the newline-delimited ``key=value`` bodies."""
import re
from typing import Dict

from ..transport import TransportResponse
from ...exceptions import MalformedResponse, UnexpectedStatus
from ...models import AuthToken, MasterToken
from ...result import Failure, Result, Success

HTTP_OK = 200
EXPIRY_PATTERN = re.compile(r'[+-]?[0-9]+')
EXPIRY_MIN = -2 ** 63
EXPIRY_MAX = 2 ** 63 - 1


class ResponseParser:
    """Extracts fields from a response body."""

    @staticmethod
    def extract(body: str, key: str) -> Result[str]:
        """
        Finds the first ``key=value`` line.

        The match starts at the beginning of the body or right after a
        newline; the value runs up to the next newline or the end of the
        body and is returned verbatim.

        Args:
            body: Response text
            key: Field name

        Returns:
            Success with the value, or Failure if the field is absent
        """
        match = re.search(rf"(\n|^){re.escape(key)}=(.*)(\n|$)", body)
        if match is None:
            return Failure(f"field '{key}' not found")
        return Success(match.group(2))

    @staticmethod
    def extract_all(body: str) -> Dict[str, str]:
        """Parses every ``key=value`` line; the first occurrence of a key wins."""
        fields: Dict[str, str] = {}
        for line in body.split('\n'):
            key, sep, value = line.partition('=')
            if sep and key not in fields:
                fields[key] = value
        return fields


class ResponseHandler:
    """Maps transport responses to domain tokens."""

    def __init__(self, parser: ResponseParser = None):
        self.parser = parser or ResponseParser()

    @staticmethod
    def check_status(response: TransportResponse) -> None:
        """Raises UnexpectedStatus for anything but 200, without reading the body."""
        if response.status != HTTP_OK:
            raise UnexpectedStatus(response.status)

    def _require(self, body: str, key: str) -> str:
        result = self.parser.extract(body, key)
        if result.is_failure():
            raise MalformedResponse(key, self.parser.extract(body, 'Error').get_or(None))
        return result.get()

    def master_token(self, response: TransportResponse) -> MasterToken:
        """Extracts the master token from a master login response."""
        self.check_status(response)
        return MasterToken(self._require(response.text, 'Token'))

    def auth_token(self, response: TransportResponse) -> AuthToken:
        """Extracts token and expiry from an OAuth exchange response."""
        self.check_status(response)
        token = self._require(response.text, 'Auth')
        expiry = self._require(response.text, 'Expiry')
        if not EXPIRY_PATTERN.fullmatch(expiry):
            raise MalformedResponse('Expiry')
        value = int(expiry)
        if not EXPIRY_MIN <= value <= EXPIRY_MAX:
            raise MalformedResponse('Expiry', f"out of 64-bit range: {expiry}")
        return AuthToken(token=token, expiry=value)
