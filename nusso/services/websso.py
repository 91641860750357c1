"""Talks to the WebSSO identity provider directly."""

from typing import Any, Tuple

from ..exceptions import ConfigurationError, SessionLookupFailed
from .. import redirects
from .base import SSOServiceSession


class WebSSOSession(SSOServiceSession):
    """Asks the WebSSO sessions endpoint about SSO tokens."""

    @property
    def session_info_url(self) -> str:
        """The WebSSO identity confirmation URL."""
        return (f'https://{self.config.domain}/nusso/json/realms/root/realms/'
                f'{self.config.realm}/sessions?_action=getSessionInfo')

    def _fetch_session_info(self, token: str) -> Tuple[int, Any]:
        headers = {
            'Content-Type': 'application/json',
            'Accept-API-Version': 'resource=3',
        }
        return self._request(SessionLookupFailed, 'POST',
                             self.session_info_url,
                             json={'tokenId': token, 'realm': '/'},
                             headers=headers)

    def get_login_url(self, duo_required: bool, redirect_url: str) -> str:
        """Build the WebSSO login URL; no request is made."""
        return redirects.websso_login_url(duo_required, redirect_url,
                                          self.config)

    def get_logout_url(self) -> str:
        """Not available without the Apigee proxy."""
        raise ConfigurationError('Logout URLs are only available through'
                                 ' the apigee variant')
