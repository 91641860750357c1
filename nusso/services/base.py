"""Base class for the WebSSO service sessions."""

from typing import Any, Optional, Tuple, Type

import requests

from ..domain import ProviderConfig, SessionInfo, Unauthenticated, \
    ProviderError
from ..exceptions import SessionLookupFailed, WebSSOError
from ..sessions import classify
from .. import logging

logger = logging.getLogger(__name__)


class SSOServiceSession(object):
    """
    Holds the HTTP session used to talk to one WebSSO deployment.

    Subclasses know how to ask their deployment about an SSO token and how to
    get login and logout URLs; interpreting the answer is shared. Each
    operation makes at most one request. Nothing is retried or cached.
    """

    tolerate_proxy_fault = False
    """Whether a 500 from the proxy may stand for an upstream 401."""

    def __init__(self, config: ProviderConfig) -> None:
        """Create a new HTTP session."""
        self.config = config
        self._session = requests.Session()
        logger.debug('New %s for %s', self.__class__.__name__,
                     config.variant)

    def __enter__(self) -> 'SSOServiceSession':
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the connections held by the HTTP session."""
        self._session.close()

    def _request(self, failure: Type[WebSSOError], method: str, url: str,
                 **kwargs: Any) -> Tuple[int, Any]:
        """
        Make a request, and get the status and decoded body of the response.

        Any response is returned, whatever its status. If no response could
        be had at all, ``failure`` is raised with status 500.
        """
        try:
            response = self._session.request(method, url,
                                             timeout=self.config.timeout,
                                             **kwargs)
        except requests.exceptions.RequestException as e:
            raise failure(message=f'Error getting {failure.operation}: {e}') \
                from e
        logger.debug('%s %s responded with status %i', method, url,
                     response.status_code)
        try:
            data: Any = response.json()
        except ValueError:
            logger.debug('Response could not be decoded as JSON')
            data = response.text or None
        return response.status_code, data

    def _fetch_session_info(self, token: str) -> Tuple[int, Any]:
        raise NotImplementedError('Implemented by the deployment variant')

    def get_session_info(self, token: Optional[str]) -> SessionInfo:
        """
        Get information about the session for an SSO token.

        Parameters
        ----------
        token : str
            The value in the SSO cookie. If there is none, there is no session
            and WebSSO is not called.

        Returns
        -------
        :class:`.Authenticated` or :class:`.Unauthenticated`

        Raises
        ------
        :class:`.SessionLookupFailed`
            If WebSSO could not be reached or gave an unexpected response.

        """
        if not token:
            return Unauthenticated()
        status, data = self._fetch_session_info(token)
        session_info = classify(status, data, self.tolerate_proxy_fault)
        if isinstance(session_info, ProviderError):
            raise SessionLookupFailed(session_info.status, session_info.data)
        return session_info

    def get_login_url(self, duo_required: bool, redirect_url: str) -> str:
        """Get the URL that sends the user to log in."""
        raise NotImplementedError('Implemented by the deployment variant')

    def get_logout_url(self) -> str:
        """Get the URL that sends the user to log out."""
        raise NotImplementedError('Implemented by the deployment variant')
