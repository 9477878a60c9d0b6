"""Testing support – in-memory destinations for unit tests."""
from logchain.testing.fakes import FailingDestination, RecordingDestination

__all__ = ["FailingDestination", "RecordingDestination"]
