"""
Interprets WebSSO session info responses.

The two WebSSO deployments answer a session lookup in slightly different
shapes. :func:`classify` turns any (status, body) pair into one of the
:data:`.domain.SessionInfo` variants, and the remaining functions answer
questions about a classified session without caring where it came from.
"""

from typing import Any, Optional

from . import domain
from .domain import Authenticated, ProviderError, SessionInfo, \
    Unauthenticated

UPSTREAM_UNAUTHORIZED_FAULT = 'ResponseCode 401 is treated as error'
"""Apigee reports a 401 from WebSSO as a 500 with this in the fault string."""


def is_upstream_unauthorized(data: Any) -> bool:
    """Check whether a proxy fault body means that WebSSO said 401."""
    if isinstance(data, str):
        return UPSTREAM_UNAUTHORIZED_FAULT in data
    if not isinstance(data, dict):
        return False
    fault = data.get('fault')
    if not isinstance(fault, dict):
        return False
    faultstring = fault.get('faultstring')
    return isinstance(faultstring, str) \
        and UPSTREAM_UNAUTHORIZED_FAULT in faultstring


def _is_true(value: Any) -> bool:
    return value is True or value == 'true'


def _duo_flag(data: dict) -> bool:
    # The direct call has the flag at the top level; the proxy nests it.
    if domain.DUO_PROPERTY_NAME in data:
        return _is_true(data[domain.DUO_PROPERTY_NAME])
    properties = data.get('properties')
    if isinstance(properties, dict):
        return _is_true(properties.get(domain.DUO_PROPERTY_NAME))
    return False


def classify(status: int, data: Any,
             tolerate_proxy_fault: bool = False) -> SessionInfo:
    """
    Interpret a session info response.

    Parameters
    ----------
    status : int
        HTTP status code of the response.
    data : Any
        Decoded body of the response.
    tolerate_proxy_fault : bool
        If True, a 500 whose fault says that WebSSO answered 401 is treated
        the same as a 401. Only the Apigee proxy does this.

    Returns
    -------
    :class:`.Authenticated`, :class:`.Unauthenticated`, or
    :class:`.ProviderError`

    """
    if status == 200:
        if not isinstance(data, dict):
            return ProviderError(status=status, data=data)
        netid = data.get(domain.NETID_PROPERTY_NAME)
        if netid:
            return Authenticated(netid=netid, duo_authenticated=_duo_flag(data),
                                 data=data)
        return Unauthenticated(data=data)
    if status == 401:
        return Unauthenticated(data=data)
    if status == 500 and tolerate_proxy_fault \
            and is_upstream_unauthorized(data):
        return Unauthenticated(data=dict(domain.UNAUTHORIZED_DATA))
    return ProviderError(status=status, data=data)


def is_logged_in(session_info: SessionInfo) -> bool:
    """Check whether the user's session is valid."""
    return isinstance(session_info, Authenticated)


def is_duo_authenticated(session_info: SessionInfo) -> bool:
    """
    Check whether the user passed through Duo.

    False whenever the session is not valid, whatever the body says.
    """
    return isinstance(session_info, Authenticated) \
        and session_info.duo_authenticated


def get_netid(session_info: SessionInfo) -> Optional[str]:
    """Get the logged in user's netid, or None if there is no valid session."""
    if isinstance(session_info, Authenticated):
        return session_info.netid
    return None
