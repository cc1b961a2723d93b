"""
Notifier Transports

Provider bridges: GatewayApi (SMS), Telegram (chat), Null.
"""
from .base import AbstractTransport
from .dsn import Dsn
from .gatewayapi import GatewayApiTransport
from .telegram import TelegramTransport
from .null import NullTransport
from .factory import (
    TransportFactory,
    GatewayApiTransportFactory,
    TelegramTransportFactory,
    NullTransportFactory,
    default_factories,
)

__all__ = [
    'AbstractTransport',
    'Dsn',
    'GatewayApiTransport',
    'TelegramTransport',
    'NullTransport',
    'TransportFactory',
    'GatewayApiTransportFactory',
    'TelegramTransportFactory',
    'NullTransportFactory',
    'default_factories',
]
