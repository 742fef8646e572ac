"""String-message bridge to the embedded simulation."""

from sandshell.game.bridge.event_bridge import EventBridge, MessageChannel
from sandshell.game.bridge.orientation import OrientationTracker, RotationOutcome
from sandshell.game.bridge.protocol import ProtocolMessage

__all__ = [
    "EventBridge",
    "MessageChannel",
    "OrientationTracker",
    "ProtocolMessage",
    "RotationOutcome",
]
