"""
Functions for checking WebSSO sessions from a request handler.

A typical handler does something like:

.. code-block:: python

   token = api.get_sso_cookie(request.cookies)
   session_info = api.get_session_info(token)
   if not api.is_logged_in(session_info):
       return redirect(api.get_login_url(False, request.url))
   netid = api.get_netid(session_info)

When ``config`` is omitted, the deployment is described by the current
application config (or the environment).
"""

from typing import Callable, Optional, TypeVar

from . import services
from .context import get_application_config
from .cookies import get_sso_cookie
from .domain import ProviderConfig, SessionInfo
from .sessions import get_netid, is_duo_authenticated, is_logged_in
from .services.base import SSOServiceSession

__all__ = ('get_sso_cookie', 'get_session_info', 'is_logged_in',
           'is_duo_authenticated', 'get_netid', 'get_login_url',
           'get_logout_url')

T = TypeVar('T')


def _with_service(config: Optional[ProviderConfig],
                  call: Callable[[SSOServiceSession], T]) -> T:
    if config is None:
        # Sessions kept on the app context are only closed if the app has
        # the teardown from :func:`.services.init_app`.
        if services.is_installed():
            return call(services.current_session())
        config = ProviderConfig.from_config(get_application_config())
    with services.session_for(config) as service:
        return call(service)


def get_session_info(token: Optional[str],
                     config: Optional[ProviderConfig] = None) -> SessionInfo:
    """
    Get information about the session for an SSO token.

    Raises :class:`.SessionLookupFailed` if WebSSO gave an unexpected
    response. An invalid or missing token is not an error.
    """
    return _with_service(config, lambda s: s.get_session_info(token))


def get_login_url(duo_required: bool, redirect_url: str,
                  config: Optional[ProviderConfig] = None) -> str:
    """Get the URL that sends the user to log in, then to ``redirect_url``."""
    return _with_service(
        config, lambda s: s.get_login_url(duo_required, redirect_url)
    )


def get_logout_url(config: Optional[ProviderConfig] = None) -> str:
    """Get the URL that sends the user to log out (Apigee variant only)."""
    return _with_service(config, lambda s: s.get_logout_url())
