"""
Flask integration.

Install :class:`NUSSO` on an application to have the WebSSO session of each
request available as ``request.sso``, and protect views with
:func:`login_required`:

.. code-block:: python

   from flask import Flask, request
   from nusso.ext import NUSSO, login_required
   from nusso import get_netid


   def create_web_app() -> Flask:
       app = Flask('someapp')
       NUSSO(app)
       app.register_blueprint(routes.blueprint)
       return app


   @blueprint.route('/grades')
   @login_required(duo=True)
   def grades():
       return f'Hello, {get_netid(request.sso)}'

"""

from functools import wraps
from typing import Any, Callable, Optional

from flask import Flask, redirect, request

from . import api, services
from .cookies import get_sso_cookie
from .domain import SessionInfo
from .sessions import is_duo_authenticated, is_logged_in
from . import logging

logger = logging.getLogger(__name__)


class NUSSO(object):
    """Attaches WebSSO session information to the request."""

    def __init__(self, app: Optional[Flask] = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Set configuration defaults, and look up sessions per request."""
        self.app = app
        services.init_app(app)
        app.before_request(self.load_session)

    def load_session(self) -> None:
        """
        Look up the session of the SSO cookie, and attach it to the request.

        Errors from WebSSO are not handled here; the application decides what
        to do with a :class:`.SessionLookupFailed`.
        """
        request.sso = current_sso_session()


def current_sso_session() -> SessionInfo:
    """Get the WebSSO session of the current request."""
    session_info: Optional[SessionInfo] = getattr(request, 'sso', None)
    if session_info is None:
        token = get_sso_cookie(request.cookies)
        session_info = api.get_session_info(token)
        request.sso = session_info
    return session_info


def login_required(duo: bool = False) -> Callable:
    """
    Generate a decorator that sends users without a session to WebSSO.

    Parameters
    ----------
    duo : bool
        If True, the session must also have passed through Duo.

    """
    def protector(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            session_info = current_sso_session()
            if not is_logged_in(session_info) \
                    or (duo and not is_duo_authenticated(session_info)):
                logger.debug('No acceptable session; redirecting to login')
                return redirect(api.get_login_url(duo, request.url))
            return func(*args, **kwargs)
        return wrapper
    return protector
