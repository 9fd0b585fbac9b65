"""Tests for response parsing."""
import pytest

from aiogpsoauth.core.api import ResponseHandler, ResponseParser, TransportResponse
from aiogpsoauth.core.exceptions import MalformedResponse, UnexpectedStatus
from aiogpsoauth.core.models import AuthToken, MasterToken


class TestResponseParser:
    """Test suite for ResponseParser.extract."""

    def test_first_line(self):
        """Test a field on the first line."""
        assert ResponseParser.extract("Token=abc123\nExpiry=456", "Token").get() == "abc123"

    def test_last_line_without_newline(self):
        """Test a field at the end of the body."""
        assert ResponseParser.extract("Auth=tok\nExpiry=100", "Expiry").get() == "100"

    def test_missing_field(self):
        """Test a missing field is a failure."""
        assert ResponseParser.extract("Token=abc123\nExpiry=456", "Missing").is_failure()

    def test_key_must_start_a_line(self):
        """Test a key embedded in another key does not match."""
        assert ResponseParser.extract("MyToken=abc\n", "Token").is_failure()

    def test_first_match_wins(self):
        """Test only the first occurrence is used."""
        assert ResponseParser.extract("Token=one\nToken=two\n", "Token").get() == "one"

    def test_value_is_not_trimmed(self):
        """Test the value is returned verbatim."""
        assert ResponseParser.extract("Token= a b \n", "Token").get() == " a b "

    def test_empty_value(self):
        """Test an empty value is a success."""
        assert ResponseParser.extract("Token=\nAuth=x", "Token").get() == ""

    def test_value_may_contain_equals(self):
        """Test the value runs to the end of the line."""
        assert ResponseParser.extract("Auth=a=b=c\n", "Auth").get() == "a=b=c"

    def test_key_is_not_a_pattern(self):
        """Test regex metacharacters in the key are literal."""
        assert ResponseParser.extract("A.b=1\nAxb=2", "A.b").get() == "1"
        assert ResponseParser.extract("Axb=2", "A.b").is_failure()

    def test_extract_all(self):
        """Test every key=value line is parsed."""
        body = "SID=s\nLSID=l\nAuth=a=b\nnoise\nSID=other\n"

        assert ResponseParser.extract_all(body) == {'SID': 's', 'LSID': 'l', 'Auth': 'a=b'}


class TestResponseHandler:
    """Test suite for ResponseHandler."""

    @pytest.fixture
    def handler(self):
        """Create handler instance."""
        return ResponseHandler()

    def test_master_token(self, handler):
        """Test master token extraction."""
        token = handler.master_token(TransportResponse(200, "SID=x\nToken=MT1\n"))

        assert token == MasterToken("MT1")

    def test_master_token_missing(self, handler):
        """Test missing Token field."""
        with pytest.raises(MalformedResponse) as exc_info:
            handler.master_token(TransportResponse(200, "SID=x\n"))

        assert exc_info.value.field == 'Token'

    def test_server_error_detail(self, handler):
        """Test the Error field is carried for diagnostics."""
        with pytest.raises(MalformedResponse) as exc_info:
            handler.master_token(TransportResponse(200, "Error=BadAuthentication\n"))

        assert exc_info.value.detail == 'BadAuthentication'

    @pytest.mark.parametrize("status", [201, 204, 301, 400, 403, 500])
    def test_non_200_skips_body(self, handler, status):
        """Test non-200 responses fail even with a valid body."""
        response = TransportResponse(status, "Token=MT1\nAuth=a\nExpiry=1\n")

        with pytest.raises(UnexpectedStatus) as exc_info:
            handler.master_token(response)
        assert exc_info.value.status == status

        with pytest.raises(UnexpectedStatus):
            handler.auth_token(response)

    def test_auth_token(self, handler):
        """Test Auth and Expiry extraction."""
        token = handler.auth_token(TransportResponse(200, "Auth=tok\nExpiry=100"))

        assert token == AuthToken(token="tok", expiry=100)

    def test_auth_token_expiry_64_bit_bounds(self, handler):
        """Test the extreme signed 64-bit expiries are accepted."""
        high = handler.auth_token(TransportResponse(200, "Auth=a\nExpiry=9223372036854775807"))
        low = handler.auth_token(TransportResponse(200, "Auth=a\nExpiry=-9223372036854775808"))

        assert high.expiry == 2 ** 63 - 1
        assert low.expiry == -2 ** 63

    @pytest.mark.parametrize("body,field", [
        ("Expiry=100\n", "Auth"),
        ("Auth=tok\n", "Expiry"),
        ("Auth=tok\nExpiry=soon\n", "Expiry"),
        ("Auth=tok\nExpiry=\n", "Expiry"),
        ("Auth=tok\nExpiry=1.5\n", "Expiry"),
        ("Auth=tok\nExpiry=" + "9" * 30 + "\n", "Expiry"),
        ("Auth=tok\nExpiry=9223372036854775808\n", "Expiry"),
        ("Auth=tok\nExpiry=-9223372036854775809\n", "Expiry"),
    ])
    def test_auth_token_malformed(self, handler, body, field):
        """Test missing or invalid fields."""
        with pytest.raises(MalformedResponse) as exc_info:
            handler.auth_token(TransportResponse(200, body))

        assert exc_info.value.field == field
