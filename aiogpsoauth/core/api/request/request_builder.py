"""Request builder for the two authentication exchanges."""
from typing import Dict

from ..config import AuthConfig
from ...crypto import CredentialSigner
from ...models import Credentials, DeviceContext, MasterToken, ServiceRequest

ACCOUNT_TYPE = 'HOSTED_OR_GOOGLE'
SOURCE = 'android'


class RequestBuilder:
    """Builds form bodies and headers.

    Field names, values and order are fixed by the remote service and must
    not be changed.
    """

    def __init__(self, config: AuthConfig, signer: CredentialSigner = None):
        """Initializes request builder."""
        self.config = config
        self.signer = signer or CredentialSigner()

    def build_headers(self) -> Dict[str, str]:
        """Builds request headers."""
        return {'User-Agent': self.config.user_agent}

    def master_login_form(
        self,
        credentials: Credentials,
        device: DeviceContext,
        service: str
    ) -> Dict[str, str]:
        """Builds the master login form, encrypting the password."""
        encrypted = self.signer.sign_encoded(
            credentials.username,
            credentials.password,
            self.config.modulus,
            self.config.exponent
        )
        return {
            'accountType': ACCOUNT_TYPE,
            'Email': credentials.username,
            'has_permission': '1',
            'add_account': '1',
            'EncryptedPasswd': encrypted,
            'service': service,
            'source': SOURCE,
            'androidId': device.android_id,
            'device_country': device.device_country,
            'operatorCountry': device.operator_country,
            'lang': device.lang,
            'sdk_version': device.sdk_version,
        }

    def oauth_form(
        self,
        username: str,
        master_token: MasterToken,
        device: DeviceContext,
        request: ServiceRequest
    ) -> Dict[str, str]:
        """Builds the OAuth exchange form. The master token is sent as-is."""
        return {
            'accountType': ACCOUNT_TYPE,
            'Email': username,
            'has_permission': '1',
            'EncryptedPasswd': master_token.token,
            'service': request.service,
            'source': SOURCE,
            'androidId': device.android_id,
            'app': request.app,
            'client_sig': request.client_sig,
            'device_country': device.device_country,
            'operatorCountry': device.operator_country,
            'lang': device.lang,
            'sdk_version': device.sdk_version,
        }
