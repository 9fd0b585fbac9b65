"""Pytest fixtures for aiogpsoauth tests."""
import asyncio
from typing import Dict, List, Optional, Tuple

import pytest
from Crypto.PublicKey import RSA

from aiogpsoauth.core.api import AuthConfig, TransportResponse


class FakeTransport:
    """Transport returning canned responses and recording every request."""

    def __init__(self, responses: Optional[List] = None):
        self.responses = list(responses or [])
        self.requests: List[Tuple[str, Dict[str, str], Dict[str, str]]] = []

    def queue(self, status: int, text: str = '') -> 'FakeTransport':
        self.responses.append(TransportResponse(status=status, text=text))
        return self

    def queue_error(self, error: BaseException) -> 'FakeTransport':
        self.responses.append(error)
        return self

    async def post_form(self, url, form, headers):
        self.requests.append((url, dict(form), dict(headers)))
        await asyncio.sleep(0)
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture(scope='session')
def rsa_key():
    """Generates a 1024-bit RSA key pair once per test session."""
    return RSA.generate(1024)


@pytest.fixture
def auth_config(rsa_key):
    """AuthConfig using the test key pair's public half."""
    return AuthConfig(modulus=rsa_key.n, exponent=rsa_key.e, user_agent='test-agent')


@pytest.fixture
def transport():
    """Empty fake transport."""
    return FakeTransport()


@pytest.fixture
def login_args():
    """Arguments of a full login."""
    return {
        'username': 'user@example.com',
        'password': 'hunter2',
        'android_id': '38c6ee9a82b8b10a',
        'service': 'oauth2:https://www.googleapis.com/auth/drive',
        'app': 'com.google.android.apps.docs',
        'client_sig': '38918a453d07199354f8b19af05ec6562ced5788',
    }
