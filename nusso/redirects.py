"""
Builds the URLs that send a user to WebSSO.

The second-factor flag is the only input that changes the flow: it picks one
of two authentication trees (direct variant) or one of two proxy paths
(Apigee variant).
"""

from . import domain
from .domain import ProviderConfig


def select_tree(duo_required: bool, config: ProviderConfig) -> str:
    """Get the WebSSO authentication tree for a login."""
    return config.duo_tree if duo_required else config.ldap_tree


def select_apigee_path(duo_required: bool) -> str:
    """Get the Apigee path that hands out a login URL."""
    if duo_required:
        return domain.APIGEE_LDAP_AND_DUO_PATH
    return domain.APIGEE_LDAP_ONLY_PATH


def apigee_url(config: ProviderConfig, path: str) -> str:
    """Get the URL of a path on the agentless-websso proxy."""
    return f'https://{config.gateway_host}/{domain.APIGEE_PROXY_NAME}/{path}'


def websso_login_url(duo_required: bool, redirect_url: str,
                     config: ProviderConfig) -> str:
    """
    Get the URL of the WebSSO login page.

    Parameters
    ----------
    duo_required : bool
        Whether the user must also pass through Duo.
    redirect_url : str
        Where WebSSO sends the user after a successful login. This is passed
        along as-is; checking it is up to the caller.
    config : :class:`.ProviderConfig`

    Returns
    -------
    str

    """
    tree = select_tree(duo_required, config)
    return (f'https://{config.domain}/nusso/XUI/?realm={config.realm}'
            f'#login&authIndexType=service&authIndexValue={tree}'
            f'&goto={redirect_url}')
