"""Defines the SSO session concepts used by :mod:`nusso`."""

from typing import Any, Mapping, NamedTuple, Optional, Union

from .exceptions import ConfigurationError

SSO_COOKIE_NAME = 'nusso'
"""The name of the NU SSO cookie."""

NETID_PROPERTY_NAME = 'username'
"""The name of the netid property in the session info."""

DUO_PROPERTY_NAME = 'isDuoAuthenticated'
"""The name of the duo auth true/false property in the session info."""

WEBSSO = 'websso'
"""Variant that calls the identity provider directly."""

APIGEE = 'apigee'
"""Variant that calls the identity provider through the Apigee proxy."""

VARIANTS = (WEBSSO, APIGEE)

APIGEE_PROXY_NAME = 'agentless-websso'
APIGEE_SESSION_INFO_PATH = 'session-info'
APIGEE_LDAP_ONLY_PATH = 'get-ldap-redirect-url'
APIGEE_LDAP_AND_DUO_PATH = 'get-ldap-duo-redirect-url'
APIGEE_LOGOUT_PATH = 'logout'

LDAP_TREE = 'ldap-registry'
LDAP_AND_DUO_TREE = 'ldap-and-duo'

UNAUTHORIZED_DATA = {'code': 401, 'reason': 'Unauthorized',
                     'message': 'Access Denied'}
"""Body reported for an unauthenticated session, whatever the variant."""


class Authenticated(NamedTuple):
    """A valid SSO session."""

    netid: str
    """The logged in user's netid."""

    duo_authenticated: bool
    """Whether the session passed through Duo."""

    data: Any = None
    """The raw session info returned by the provider."""

    status: int = 200


class Unauthenticated(NamedTuple):
    """No valid SSO session; a normal outcome, not an error."""

    data: Any = None
    status: int = 401


class ProviderError(NamedTuple):
    """The provider returned something other than a session verdict."""

    status: int
    data: Any = None


SessionInfo = Union[Authenticated, Unauthenticated, ProviderError]


class ProviderConfig(NamedTuple):
    """Describes the WebSSO deployment in use."""

    variant: str = WEBSSO
    """One of :const:`WEBSSO` or :const:`APIGEE`."""

    domain: str = 'dev-websso.it.northwestern.edu'
    """Host of the WebSSO identity provider."""

    realm: str = 'northwestern'
    """Identity provider realm."""

    gateway_host: Optional[str] = None
    """Host of the Apigee gateway; required for the :const:`APIGEE` variant."""

    api_key: Optional[str] = None
    """The application's Apigee API key."""

    ldap_tree: str = LDAP_TREE
    """Authentication tree for a login without Duo."""

    duo_tree: str = LDAP_AND_DUO_TREE
    """Authentication tree for a login that requires Duo."""

    timeout: Optional[float] = None
    """Passed to the HTTP transport as-is; ``None`` waits indefinitely."""

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'ProviderConfig':
        """
        Build a :class:`ProviderConfig` from a flat configuration mapping.

        Parameters
        ----------
        config : Mapping
            Either a Flask ``app.config`` or ``os.environ``. Keys are the
            ``NUSSO_*`` settings documented in :mod:`nusso.config`.

        Returns
        -------
        :class:`ProviderConfig`

        Raises
        ------
        :class:`.ConfigurationError`
            If ``NUSSO_TIMEOUT`` is not a number.

        """
        timeout = config.get('NUSSO_TIMEOUT')
        try:
            timeout = float(timeout) if timeout else None
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f'Invalid NUSSO_TIMEOUT: {timeout!r}') \
                from e
        return cls(
            variant=config.get('NUSSO_VARIANT') or WEBSSO,
            domain=config.get('NUSSO_DOMAIN') or cls._field_defaults['domain'],
            realm=config.get('NUSSO_REALM') or cls._field_defaults['realm'],
            gateway_host=config.get('NUSSO_APIGEE_HOST') or None,
            api_key=config.get('NUSSO_APIGEE_API_KEY') or None,
            ldap_tree=config.get('NUSSO_LDAP_TREE') or LDAP_TREE,
            duo_tree=config.get('NUSSO_DUO_TREE') or LDAP_AND_DUO_TREE,
            timeout=timeout
        )
