"""
Notifier Services

Dispatching and the configuration-driven composite service.
"""
from .dispatcher import Dispatcher
from .notifier_service import (
    NotifierService,
    get_notifier_service,
    init_notifier_service,
    close_notifier_service,
)

__all__ = [
    'Dispatcher',
    'NotifierService',
    'get_notifier_service',
    'init_notifier_service',
    'close_notifier_service',
]
