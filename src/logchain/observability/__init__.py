"""Observability – diagnostics for the library's own operation."""
from logchain.observability.diagnostics import DIAGNOSTICS_LOGGER, DiagnosticsLoggerFactory, get_logger

__all__ = ["DIAGNOSTICS_LOGGER", "DiagnosticsLoggerFactory", "get_logger"]
