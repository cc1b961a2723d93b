"""
Notifier Exceptions

Errors raised by transports, factories and the dispatcher.
None of them is retried internally: every error is terminal for the attempt.
"""
from typing import TYPE_CHECKING, Optional

import httpx

if TYPE_CHECKING:
    from .models.message import Message


class NotifierError(Exception):
    """Base class for all notifier failures"""


class InvalidArgumentError(NotifierError, ValueError):
    """Invalid message, option or configuration value"""


class UnsupportedSchemeError(InvalidArgumentError):
    """No factory knows the DSN scheme"""

    def __init__(self, scheme: str, supported: Optional[list] = None):
        self.scheme = scheme
        self.supported = supported or []
        message = f'The "{scheme}" scheme is not supported'
        if self.supported:
            message += f'; supported schemes: "{", ".join(self.supported)}"'
        super().__init__(message + ".")


class IncompleteDsnError(InvalidArgumentError):
    """DSN is missing a credential the transport needs"""

    def __init__(self, message: str, dsn: Optional[str] = None):
        self.dsn = dsn
        super().__init__(message)


class MissingRequiredOptionError(IncompleteDsnError):
    """DSN query is missing a required option"""

    def __init__(self, option: str, dsn: Optional[str] = None):
        self.option = option
        super().__init__(f'The option "{option}" is required but missing.', dsn)


class UnsupportedMessageTypeError(NotifierError):
    """Transport was asked to send a message kind it does not handle"""

    def __init__(self, transport: str, message: "Message"):
        self.transport = transport
        self.message = message
        super().__init__(
            f'The "{transport}" transport does not support "{message.kind.value}" messages.'
        )


class TransportError(NotifierError):
    """
    Provider call failed.

    status_code is the raw HTTP status, or None when no response was received.
    description is the provider's human-readable error, when it sent one.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        description: Optional[str] = None,
        response: Optional[httpx.Response] = None,
    ):
        self.status_code = status_code
        self.description = description
        self.response = response
        super().__init__(message)


class NoSupportingTransportError(NotifierError):
    """Dispatcher has no transport for the message"""

    def __init__(self, message: "Message"):
        self.message = message
        super().__init__(f'No transport supports "{message.kind.value}" messages.')
