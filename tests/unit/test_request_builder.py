"""Tests for form building."""
import pytest
from Crypto.Cipher import PKCS1_OAEP
from Crypto.Hash import SHA1

from aiogpsoauth.core.api import RequestBuilder
from aiogpsoauth.core.crypto import Base64Encoder
from aiogpsoauth.core.models import Credentials, DeviceContext, MasterToken, ServiceRequest


class TestRequestBuilder:
    """Test suite for RequestBuilder."""

    @pytest.fixture
    def builder(self, auth_config):
        """Create builder instance."""
        return RequestBuilder(auth_config)

    def test_headers(self, builder):
        """Test User-Agent comes from the config."""
        assert builder.build_headers() == {'User-Agent': 'test-agent'}

    def test_master_login_form(self, builder, rsa_key):
        """Test master login fields, order and encrypted password."""
        form = builder.master_login_form(
            Credentials('user@example.com', 'secret'),
            DeviceContext('abc123'),
            'ac2dm'
        )

        assert list(form) == [
            'accountType', 'Email', 'has_permission', 'add_account',
            'EncryptedPasswd', 'service', 'source', 'androidId',
            'device_country', 'operatorCountry', 'lang', 'sdk_version',
        ]
        assert form['accountType'] == 'HOSTED_OR_GOOGLE'
        assert form['Email'] == 'user@example.com'
        assert form['has_permission'] == '1'
        assert form['add_account'] == '1'
        assert form['service'] == 'ac2dm'
        assert form['source'] == 'android'
        assert form['androidId'] == 'abc123'
        assert form['device_country'] == 'us'
        assert form['operatorCountry'] == 'us'
        assert form['lang'] == 'en'
        assert form['sdk_version'] == '17'

        signature = Base64Encoder.decode(form['EncryptedPasswd'])
        cipher = PKCS1_OAEP.new(rsa_key, hashAlgo=SHA1)
        assert cipher.decrypt(signature[5:]) == b'user@example.com\x00secret'

    def test_oauth_form(self, builder):
        """Test OAuth fields and order; the master token is sent as-is."""
        form = builder.oauth_form(
            'user@example.com',
            MasterToken('aas_et/MASTER'),
            DeviceContext('abc123', 'de', 'fr', 'de', '30'),
            ServiceRequest('oauth2:scope', 'com.example', 'deadbeef')
        )

        assert form == {
            'accountType': 'HOSTED_OR_GOOGLE',
            'Email': 'user@example.com',
            'has_permission': '1',
            'EncryptedPasswd': 'aas_et/MASTER',
            'service': 'oauth2:scope',
            'source': 'android',
            'androidId': 'abc123',
            'app': 'com.example',
            'client_sig': 'deadbeef',
            'device_country': 'de',
            'operatorCountry': 'fr',
            'lang': 'de',
            'sdk_version': '30',
        }
        assert list(form)[7:9] == ['app', 'client_sig']
