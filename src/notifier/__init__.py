"""
Notifier

Notification transport bridges: SMS via GatewayApi, chat via Telegram.
"""
from .exceptions import (
    NotifierError,
    InvalidArgumentError,
    UnsupportedSchemeError,
    IncompleteDsnError,
    MissingRequiredOptionError,
    UnsupportedMessageTypeError,
    TransportError,
    NoSupportingTransportError,
)
from .models import Message, MessageKind, MessageOptions, TelegramOptions, SentMessage
from .transports import (
    AbstractTransport,
    Dsn,
    GatewayApiTransport,
    TelegramTransport,
    NullTransport,
    TransportFactory,
)
from .services.dispatcher import Dispatcher

__version__ = "0.1.0"

__all__ = [
    'NotifierError',
    'InvalidArgumentError',
    'UnsupportedSchemeError',
    'IncompleteDsnError',
    'MissingRequiredOptionError',
    'UnsupportedMessageTypeError',
    'TransportError',
    'NoSupportingTransportError',
    'Message',
    'MessageKind',
    'MessageOptions',
    'TelegramOptions',
    'SentMessage',
    'AbstractTransport',
    'Dsn',
    'GatewayApiTransport',
    'TelegramTransport',
    'NullTransport',
    'TransportFactory',
    'Dispatcher',
]
