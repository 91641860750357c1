"""Tests for :mod:`nusso.ext`."""

from unittest import TestCase, mock

from flask import Flask, request

from nusso import sessions
from nusso.exceptions import SessionLookupFailed
from nusso.ext import NUSSO, login_required
from nusso.services import base


def mock_response(status_code, data):
    """Make a response that decodes to ``data``."""
    return mock.MagicMock(status_code=status_code,
                          json=mock.MagicMock(return_value=data))


def create_app() -> Flask:
    """Make an app with a couple of protected views."""
    app = Flask('test_nusso_app')
    app.config['NUSSO_VARIANT'] = 'websso'
    app.config['NUSSO_DOMAIN'] = 'dev-websso.it.northwestern.edu'
    app.config['NUSSO_REALM'] = 'northwestern'
    NUSSO(app)

    @app.route('/whoami')
    def whoami():
        return sessions.get_netid(request.sso) or 'nobody'

    @app.route('/protected')
    @login_required()
    def protected():
        return 'hello ' + sessions.get_netid(request.sso)

    @app.route('/secret')
    @login_required(duo=True)
    def secret():
        return 'secret ' + sessions.get_netid(request.sso)

    return app


class TestNUSSOExtension(TestCase):
    """:class:`.NUSSO` attaches the SSO session to the request."""

    def setUp(self):
        """Create the app."""
        self.app = create_app()
        self.client = self.app.test_client()

    def test_config_defaults(self):
        """Missing settings are filled in."""
        self.assertIn('NUSSO_TIMEOUT', self.app.config)
        self.assertEqual(self.app.config['NUSSO_REALM'], 'northwestern')

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_no_cookie(self, mock_session):
        """Without a cookie, the provider is not called."""
        mock_session_instance = mock.MagicMock()
        mock_session.return_value = mock_session_instance

        response = self.client.get('/whoami')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(as_text=True), 'nobody')
        self.assertEqual(mock_session_instance.request.call_count, 0)

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_session(self, mock_session):
        """The cookie belongs to a valid session."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.request.return_value = mock_response(
            200, {'username': 'jdoe'}
        )
        mock_session.return_value = mock_session_instance

        response = self.client.get('/whoami',
                                   headers={'Cookie': 'nusso=tok123'})
        self.assertEqual(response.get_data(as_text=True), 'jdoe')
        self.assertEqual(mock_session_instance.request.call_count, 1)
        self.assertEqual(mock_session_instance.close.call_count, 1,
                         'The HTTP session is closed with the app context')

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_lookup_error_propagates(self, mock_session):
        """The application gets to handle lookup errors."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.request.return_value = mock_response(503, None)
        mock_session.return_value = mock_session_instance
        self.app.testing = True

        with self.assertRaises(SessionLookupFailed):
            self.client.get('/whoami', headers={'Cookie': 'nusso=tok123'})


class TestLoginRequired(TestCase):
    """:func:`.login_required` sends users without a session to WebSSO."""

    def setUp(self):
        """Create the app."""
        self.app = create_app()
        self.client = self.app.test_client()

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_not_logged_in(self, mock_session):
        """The user is redirected to log in."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.request.return_value = mock_response(401, {})
        mock_session.return_value = mock_session_instance

        response = self.client.get('/protected',
                                   headers={'Cookie': 'nusso=tok123'})
        self.assertEqual(response.status_code, 302)
        location = response.headers['Location']
        self.assertTrue(location.startswith(
            'https://dev-websso.it.northwestern.edu/nusso/XUI/'
        ))
        self.assertIn('authIndexValue=ldap-registry', location)
        self.assertIn('goto=http://localhost/protected', location)

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_logged_in(self, mock_session):
        """The user has a session."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.request.return_value = mock_response(
            200, {'username': 'jdoe'}
        )
        mock_session.return_value = mock_session_instance

        response = self.client.get('/protected',
                                   headers={'Cookie': 'nusso=tok123'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(as_text=True), 'hello jdoe')

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_duo_required(self, mock_session):
        """The user has a session, but not through Duo."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.request.return_value = mock_response(
            200, {'username': 'jdoe', 'isDuoAuthenticated': False}
        )
        mock_session.return_value = mock_session_instance

        response = self.client.get('/secret',
                                   headers={'Cookie': 'nusso=tok123'})
        self.assertEqual(response.status_code, 302)
        self.assertIn('authIndexValue=ldap-and-duo',
                      response.headers['Location'])

    @mock.patch(f'{base.__name__}.requests.Session')
    def test_duo_passed(self, mock_session):
        """The user has a session that passed through Duo."""
        mock_session_instance = mock.MagicMock()
        mock_session_instance.request.return_value = mock_response(
            200, {'username': 'jdoe', 'isDuoAuthenticated': True}
        )
        mock_session.return_value = mock_session_instance

        response = self.client.get('/secret',
                                   headers={'Cookie': 'nusso=tok123'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(as_text=True), 'secret jdoe')
