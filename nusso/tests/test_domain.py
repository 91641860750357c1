"""Tests for :mod:`nusso.domain`."""

from unittest import TestCase

from nusso import domain
from nusso.domain import ProviderConfig
from nusso.exceptions import ConfigurationError


class TestProviderConfig(TestCase):
    """:class:`.ProviderConfig` describes the WebSSO deployment."""

    def test_defaults(self):
        """An empty configuration gives the dev identity provider."""
        config = ProviderConfig.from_config({})
        self.assertEqual(config.variant, domain.WEBSSO)
        self.assertEqual(config.domain, 'dev-websso.it.northwestern.edu')
        self.assertEqual(config.realm, 'northwestern')
        self.assertEqual(config.ldap_tree, 'ldap-registry')
        self.assertEqual(config.duo_tree, 'ldap-and-duo')
        self.assertIsNone(config.gateway_host)
        self.assertIsNone(config.api_key)
        self.assertIsNone(config.timeout)

    def test_from_config(self):
        """Settings are read from the ``NUSSO_*`` keys."""
        config = ProviderConfig.from_config({
            'NUSSO_VARIANT': 'apigee',
            'NUSSO_DOMAIN': 'prod-websso.it.northwestern.edu',
            'NUSSO_REALM': 'nu',
            'NUSSO_APIGEE_HOST': 'gw.example',
            'NUSSO_APIGEE_API_KEY': 'fookey',
            'NUSSO_TIMEOUT': '2.5',
        })
        self.assertEqual(config.variant, domain.APIGEE)
        self.assertEqual(config.domain, 'prod-websso.it.northwestern.edu')
        self.assertEqual(config.realm, 'nu')
        self.assertEqual(config.gateway_host, 'gw.example')
        self.assertEqual(config.api_key, 'fookey')
        self.assertEqual(config.timeout, 2.5)

    def test_immutable(self):
        """A configuration cannot be changed in place."""
        config = ProviderConfig()
        with self.assertRaises(AttributeError):
            config.realm = 'foo'


class TestSessionInfo(TestCase):
    """The session info variants."""

    def test_statuses(self):
        """Each variant carries its status."""
        self.assertEqual(domain.Authenticated('jdoe', False).status, 200)
        self.assertEqual(domain.Unauthenticated().status, 401)
        self.assertEqual(domain.ProviderError(503).status, 503)


class TestProviderConfigTimeout(TestCase):
    """``NUSSO_TIMEOUT`` must be a number of seconds."""

    def test_invalid_timeout(self):
        """A timeout that is not a number is a configuration error."""
        with self.assertRaises(ConfigurationError):
            ProviderConfig.from_config({'NUSSO_TIMEOUT': 'soon'})

    def test_numeric_timeout(self):
        """A number from the config is accepted as-is."""
        self.assertEqual(
            ProviderConfig.from_config({'NUSSO_TIMEOUT': 5}).timeout, 5.0
        )
