"""
Talks to WebSSO through the agentless-websso Apigee proxy.

Every call carries the application's Apigee API key. When WebSSO says that a
token is not valid (401), the proxy passes that along as a 500 with a fault
body; session lookups through this class treat that the same as a 401.
"""

from typing import Any, Tuple, Type

from .. import domain, redirects
from ..domain import ProviderConfig
from ..exceptions import ConfigurationError, LoginURLLookupFailed, \
    LogoutURLLookupFailed, SessionLookupFailed, WebSSOError
from .. import logging
from .base import SSOServiceSession

logger = logging.getLogger(__name__)


class ApigeeSession(SSOServiceSession):
    """Asks the Apigee proxy about SSO tokens and login/logout URLs."""

    tolerate_proxy_fault = True

    def __init__(self, config: ProviderConfig) -> None:
        """Check that the proxy can be reached, and create the session."""
        if not config.gateway_host:
            raise ConfigurationError('NUSSO_APIGEE_HOST is not set')
        if not config.api_key:
            raise ConfigurationError('NUSSO_APIGEE_API_KEY is not set')
        super(ApigeeSession, self).__init__(config)

    def _fetch_session_info(self, token: str) -> Tuple[int, Any]:
        headers = {
            'webssotoken': token,
            'apikey': self.config.api_key,
            'Content-Type': 'application/json',
        }
        url = redirects.apigee_url(self.config,
                                   domain.APIGEE_SESSION_INFO_PATH)
        return self._request(SessionLookupFailed, 'GET', url,
                             headers=headers)

    def _get_field(self, failure: Type[WebSSOError], path: str, field: str,
                   headers: dict) -> str:
        """Get a field from the body of a successful proxy response."""
        status, data = self._request(failure, 'GET',
                                     redirects.apigee_url(self.config, path),
                                     headers=headers)
        if not 200 <= status < 300:
            raise failure(status, data)
        value = data.get(field) if isinstance(data, dict) else None
        if not value or not isinstance(value, str):
            logger.debug('Proxy response has no usable %s', field)
            raise failure(status, data,
                          f'Error getting {failure.operation}:'
                          f' response has no {field}')
        return value

    def get_login_url(self, duo_required: bool, redirect_url: str) -> str:
        """
        Get a WebSSO login URL from the proxy.

        Parameters
        ----------
        duo_required : bool
            Whether to get a URL for login-only or login+duo.
        redirect_url : str
            The URL to redirect to once login is completed.

        Returns
        -------
        str

        Raises
        ------
        :class:`.LoginURLLookupFailed`

        """
        headers = {
            'Content-Type': 'application/json',
            'goto': redirect_url,
            'apikey': self.config.api_key,
        }
        return self._get_field(LoginURLLookupFailed,
                               redirects.select_apigee_path(duo_required),
                               'redirecturl', headers)

    def get_logout_url(self) -> str:
        """
        Get a WebSSO logout URL from the proxy.

        Raises
        ------
        :class:`.LogoutURLLookupFailed`

        """
        return self._get_field(LogoutURLLookupFailed,
                               domain.APIGEE_LOGOUT_PATH, 'url',
                               {'Content-Type': 'application/json'})
