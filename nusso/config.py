"""
Configuration defaults for :mod:`nusso`.

Applications can load this module with ``app.config.from_object`` or set the
same keys on their own config; outside of an application context the values
are read from the environment.
"""
import os

NUSSO_VARIANT = os.environ.get('NUSSO_VARIANT', 'websso')
"""
Which WebSSO deployment to talk to.

``websso`` calls the identity provider directly; ``apigee`` goes through the
agentless-websso proxy.
"""

NUSSO_DOMAIN = os.environ.get('NUSSO_DOMAIN',
                              'dev-websso.it.northwestern.edu')
"""Host of the WebSSO identity provider (``websso`` variant)."""

NUSSO_REALM = os.environ.get('NUSSO_REALM', 'northwestern')

NUSSO_APIGEE_HOST = os.environ.get('NUSSO_APIGEE_HOST', '')
"""Host of the Apigee gateway (``apigee`` variant)."""

NUSSO_APIGEE_API_KEY = os.environ.get('NUSSO_APIGEE_API_KEY', '')
"""The application's Apigee API key. Keep this out of source control."""

NUSSO_LDAP_TREE = os.environ.get('NUSSO_LDAP_TREE', 'ldap-registry')
NUSSO_DUO_TREE = os.environ.get('NUSSO_DUO_TREE', 'ldap-and-duo')

NUSSO_TIMEOUT = os.environ.get('NUSSO_TIMEOUT', '')
"""Seconds to wait on WebSSO; empty means no timeout."""

LOGLEVEL = os.environ.get('LOGLEVEL', 20)
"""Level for the ``nusso`` loggers, as a number or a name like ``INFO``."""
