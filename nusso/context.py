"""Access to the application configuration, with or without Flask."""

import os
from typing import Any, Mapping, Optional

from flask import current_app, g, has_app_context


def get_application_config(app: Optional[Any] = None) -> Mapping[str, Any]:
    """
    Get a configuration from the current app, or from the environment.

    Parameters
    ----------
    app : :class:`flask.Flask`
        If not provided, the current application (if there is one) is used.

    Returns
    -------
    Mapping

    """
    if app is not None:
        return app.config
    if has_app_context():
        return current_app.config
    return os.environ


def get_application_global() -> Optional[Any]:
    """Get the application context globals, if there is an app context."""
    if has_app_context():
        return g
    return None
