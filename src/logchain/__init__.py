"""
logchain – severity-routed logging with per-level destinations.

Import path convention::

    from logchain import get_logger
    from logchain.routing import SubscriberRegistry, ChainBuilder
    from logchain.destinations import ConsoleDestination, FileDestination
"""

from logchain.facade import LogManager, Logger, create_logger, get_logger
from logchain.severity import Severity

__version__ = "0.1.0"
__all__ = ["LogManager", "Logger", "Severity", "__version__", "create_logger", "get_logger"]
