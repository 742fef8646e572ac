"""Converts device rotation deltas into world rotate commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sandshell.game.bridge.event_bridge import EventBridge
from sandshell.game.bridge.protocol import WORLD_ROTATE_CCW, WORLD_ROTATE_CW, ProtocolMessage, outbound

logger = logging.getLogger(__name__)

_ROTATIONS: dict[int, tuple[str, ...]] = {
    90: (WORLD_ROTATE_CCW,),
    180: (WORLD_ROTATE_CW, WORLD_ROTATE_CW),
    270: (WORLD_ROTATE_CW,),
}


def normalize_angle(angle: float) -> float:
    """Map any angle into [0, 360)."""
    return ((angle % 360) + 360) % 360


def rotation_delta(previous: float, current: float) -> float:
    return (normalize_angle(current) - normalize_angle(previous) + 360) % 360


def rotation_commands(delta: float) -> tuple[ProtocolMessage, ...]:
    """Rotate commands that undo a device rotation of `delta` degrees."""
    if delta != int(delta):
        return ()
    return tuple(outbound(payload) for payload in _ROTATIONS.get(int(delta), ()))


@dataclass(frozen=True, slots=True)
class RotationOutcome:
    """Angle to store and the commands that were sent for one pass."""

    angle: float
    commands: tuple[ProtocolMessage, ...]


class OrientationTracker:
    """Emits rotate commands through the bridge when the device turns."""

    def __init__(self, bridge: EventBridge) -> None:
        self._bridge = bridge

    def track(self, previous: float, current: float, *, auto_rotate: bool) -> RotationOutcome:
        """Evaluate one layout pass. The new angle is kept even without auto-rotate."""
        angle = normalize_angle(current)
        if not auto_rotate:
            return RotationOutcome(angle=angle, commands=())
        delta = rotation_delta(previous, current)
        commands = rotation_commands(delta)
        if commands:
            logger.info("world_rotation delta=%s commands=%d", delta, len(commands))
        for command in commands:
            self._bridge.send(command)
        return RotationOutcome(angle=angle, commands=commands)
