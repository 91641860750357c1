"""Exceptions raised when talking to WebSSO."""

from typing import Any, Optional


class ConfigurationError(RuntimeError):
    """The WebSSO configuration is missing, invalid, or unsupported."""


class WebSSOError(RuntimeError):
    """
    A WebSSO call failed.

    Carries the name of the failed operation, the status code reported by the
    provider (500 if there was none), and the response body (if any).
    """

    operation = 'websso response'

    def __init__(self, status: Optional[int] = None, data: Any = None,
                 message: Optional[str] = None) -> None:
        """Set the status and body of the failed call."""
        self.status = status or 500
        self.data = data
        super(WebSSOError, self).__init__(
            message or f'Error getting {self.operation}'
        )

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}({str(self)!r},'
                f' status={self.status!r}, data={self.data!r})')


class SessionLookupFailed(WebSSOError):
    """Could not get session info for an SSO token."""

    operation = 'session info'


class LoginURLLookupFailed(WebSSOError):
    """Could not get a WebSSO login URL from the proxy."""

    operation = 'login url'


class LogoutURLLookupFailed(WebSSOError):
    """Could not get a WebSSO logout URL from the proxy."""

    operation = 'logout url'
