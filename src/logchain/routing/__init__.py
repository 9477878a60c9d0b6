"""Routing – severity handler chain and level-keyed subscriber registry."""
from logchain.routing.chain import (
    DEFAULT_ORDER,
    ChainBuilder,
    ChainLink,
    HandlerChain,
    SeverityHandler,
)
from logchain.routing.registry import ErrorReporter, SubscriberRegistry, log_delivery_failure
from logchain.routing.wiring import (
    DEFAULT_WIRING,
    Wiring,
    build_destinations,
    build_registry,
    default_wiring,
    parse_routes,
    resolve_policy,
    wire_from_settings,
)

__all__ = [
    "DEFAULT_ORDER",
    "DEFAULT_WIRING",
    "ChainBuilder",
    "ChainLink",
    "ErrorReporter",
    "HandlerChain",
    "SeverityHandler",
    "SubscriberRegistry",
    "Wiring",
    "build_destinations",
    "build_registry",
    "default_wiring",
    "log_delivery_failure",
    "parse_routes",
    "resolve_policy",
    "wire_from_settings",
]
