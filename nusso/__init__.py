"""
Northwestern WebSSO session checks for Python web applications.

This package answers three questions about an incoming request: does its
``nusso`` cookie belong to a valid WebSSO session, did that session pass
through Duo, and whose session is it. When the answer is no, it builds the
URL that sends the user to log in.

Two WebSSO deployments are supported, selected with ``NUSSO_VARIANT``:

- ``websso`` calls the identity provider's sessions endpoint directly, and
  builds login URLs locally.
- ``apigee`` calls the agentless-websso proxy, which also hands out login and
  logout URLs. It needs ``NUSSO_APIGEE_HOST`` and ``NUSSO_APIGEE_API_KEY``.

Quick start
-----------

.. code-block:: python

   from nusso import api

   token = api.get_sso_cookie(request.cookies)
   session_info = api.get_session_info(token)
   if api.is_logged_in(session_info):
       netid = api.get_netid(session_info)

Flask applications can use :class:`nusso.ext.NUSSO` instead.
"""

from .api import get_sso_cookie, get_session_info, is_logged_in, \
    is_duo_authenticated, get_netid, get_login_url, get_logout_url
from .domain import ProviderConfig, Authenticated, Unauthenticated, \
    ProviderError, SessionInfo
from .exceptions import WebSSOError, SessionLookupFailed, \
    LoginURLLookupFailed, LogoutURLLookupFailed, ConfigurationError
