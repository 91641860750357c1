"""Provides functions for getting the SSO token out of request cookies."""

from typing import Mapping, Optional

from werkzeug.http import parse_cookie

from .domain import SSO_COOKIE_NAME


def get_sso_cookie(cookies: Mapping[str, str]) -> Optional[str]:
    """
    Get the SSO token from the request cookies.

    Parameters
    ----------
    cookies : Mapping
        All of the cookies on the request, e.g. ``flask.request.cookies``.

    Returns
    -------
    str or None
        The value of the ``nusso`` cookie, or None if it is missing or empty.

    """
    return cookies.get(SSO_COOKIE_NAME) or None


def parse_sso_cookie(raw_cookie: Optional[str]) -> Optional[str]:
    """Get the SSO token from a raw ``Cookie`` header."""
    if not raw_cookie:
        return None
    return get_sso_cookie(parse_cookie(raw_cookie))
