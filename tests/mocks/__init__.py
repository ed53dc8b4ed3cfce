"""Mock implementations of external services for testing."""

from .mock_socketio import EmittedEvent, MockSocketIO

__all__ = [
    "EmittedEvent",
    "MockSocketIO",
]
