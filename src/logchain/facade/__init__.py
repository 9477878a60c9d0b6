"""Facade – Logger handle and the process-wide LogManager."""
from logchain.facade.logger import Logger
from logchain.facade.manager import LogManager, build_logger, create_logger, get_logger

__all__ = ["LogManager", "Logger", "build_logger", "create_logger", "get_logger"]
