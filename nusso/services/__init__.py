"""
Service sessions for the WebSSO deployments.

:class:`.WebSSOSession` calls the identity provider directly, and
:class:`.ApigeeSession` goes through the agentless-websso proxy. Which one is
used is decided by the ``NUSSO_VARIANT`` setting.
"""

from typing import Any, Dict, Optional, Type

from flask import current_app, has_app_context

from .. import config as default_config
from .. import domain
from ..context import get_application_config, get_application_global
from ..domain import ProviderConfig
from ..exceptions import ConfigurationError
from .apigee import ApigeeSession
from .base import SSOServiceSession
from .websso import WebSSOSession

SESSION_CLASSES: Dict[str, Type[SSOServiceSession]] = {
    domain.WEBSSO: WebSSOSession,
    domain.APIGEE: ApigeeSession,
}


def init_app(app: Any) -> None:
    """
    Set required configuration defaults for the application.

    Also closes the service session of each app context when the context
    ends, so that :func:`current_session` can be used.
    """
    for key in dir(default_config):
        if key.isupper():
            app.config.setdefault(key, getattr(default_config, key))
    if 'nusso' not in app.extensions:
        app.extensions['nusso'] = True
        app.teardown_appcontext(close_session)


def is_installed(app: Optional[Any] = None) -> bool:
    """Check whether :func:`init_app` was called on the (current) app."""
    if app is None:
        if not has_app_context():
            return False
        app = current_app
    return 'nusso' in app.extensions


def session_for(config: ProviderConfig) -> SSOServiceSession:
    """
    Create a service session for a WebSSO deployment.

    Raises
    ------
    :class:`.ConfigurationError`
        If the variant is not known, or its settings are incomplete.

    """
    try:
        session_class = SESSION_CLASSES[config.variant]
    except KeyError as e:
        raise ConfigurationError(f'Unknown NUSSO_VARIANT: {config.variant}') \
            from e
    return session_class(config)


def get_session(app: Optional[Any] = None) -> SSOServiceSession:
    """Create a new service session from the application config."""
    return session_for(
        ProviderConfig.from_config(get_application_config(app))
    )


def current_session(app: Optional[Any] = None) -> SSOServiceSession:
    """Get the service session for this context (if there is one)."""
    g = get_application_global()
    if g is not None:
        if 'nusso' not in g:
            g.nusso = get_session(app)
        return g.nusso
    return get_session(app)


def close_session(exception: Optional[BaseException] = None) -> None:
    """Close the service session of this context, if one was opened."""
    g = get_application_global()
    if g is not None:
        session = g.pop('nusso', None)
        if session is not None:
            session.close()
