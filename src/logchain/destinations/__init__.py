"""Destinations – sinks that deliver formatted log lines."""
from logchain.destinations.console import ConsoleDestination
from logchain.destinations.database import DatabaseDestination
from logchain.destinations.file import FileDestination
from logchain.destinations.protocol import Destination
from logchain.destinations.stdlib import StdlibLoggerDestination

__all__ = [
    "ConsoleDestination",
    "DatabaseDestination",
    "Destination",
    "FileDestination",
    "StdlibLoggerDestination",
]
