"""Closed message vocabulary exchanged with the embedded simulation.

Both directions use a two-field envelope: a fixed discriminator tag under
`type` and one string under `payload`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

OUTBOUND_TAG = "site-event"
INBOUND_TAG = "game-event"

WORLD_START = "world:start"
WORLD_STOP = "world:stop"
WORLD_ERASE = "world:erase"
WORLD_GEN = "world:gen"
WORLD_ROTATE_CW = "world:rotate_cw"
WORLD_ROTATE_CCW = "world:rotate_ccw"
GAME_FULLSCREEN = "game:fullscreen"

WORLD_DEBUG_PREFIX = "world:debug:"
BRUSH_SELECT_PREFIX = "brush_select:"
BRUSH_SIZE_PREFIX = "brush_size:"

OUTBOUND_EXACT = frozenset(
    {WORLD_START, WORLD_STOP, WORLD_ERASE, WORLD_GEN, WORLD_ROTATE_CW, WORLD_ROTATE_CCW}
)
OUTBOUND_PREFIXES = (BRUSH_SELECT_PREFIX, BRUSH_SIZE_PREFIX, WORLD_DEBUG_PREFIX)

INBOUND_EXACT = frozenset({GAME_FULLSCREEN, WORLD_START, WORLD_STOP})
INBOUND_PREFIXES = (WORLD_DEBUG_PREFIX, BRUSH_SELECT_PREFIX, BRUSH_SIZE_PREFIX)


class UnknownMessageError(ValueError):
    """Raised when building an outbound message outside the vocabulary."""


@dataclass(frozen=True, slots=True)
class ProtocolMessage:
    """One vocabulary string."""

    payload: str

    def __str__(self) -> str:
        return self.payload

    @property
    def verb(self) -> str:
        """Everything up to and including the last `:` of a prefixed message."""
        for prefix in (*INBOUND_PREFIXES, *OUTBOUND_PREFIXES):
            if self.payload.startswith(prefix):
                return prefix
        return self.payload

    @property
    def argument(self) -> str:
        """Suffix after a vocabulary prefix, stripped; empty for exact messages."""
        verb = self.verb
        if verb == self.payload:
            return ""
        return self.payload[len(verb) :].strip()


def _matches(payload: str, exact: frozenset[str], prefixes: tuple[str, ...]) -> bool:
    return payload in exact or any(payload.startswith(prefix) for prefix in prefixes)


def outbound(payload: str) -> ProtocolMessage:
    """Build an outbound message, rejecting anything outside the vocabulary."""
    if not _matches(payload, OUTBOUND_EXACT, OUTBOUND_PREFIXES):
        raise UnknownMessageError(f"not an outbound message: {payload!r}")
    return ProtocolMessage(payload)


def brush_select(name: str) -> ProtocolMessage:
    return outbound(f"{BRUSH_SELECT_PREFIX}{name.lower()}")


def brush_size(pixels: int) -> ProtocolMessage:
    return outbound(f"{BRUSH_SIZE_PREFIX}{int(pixels)}")


def world_debug(enabled: bool) -> ProtocolMessage:
    return outbound(f"{WORLD_DEBUG_PREFIX}{'on' if enabled else 'off'}")


def world_run(is_running: bool) -> ProtocolMessage:
    return outbound(WORLD_START if is_running else WORLD_STOP)


def envelope(message: ProtocolMessage, *, tag: str = OUTBOUND_TAG) -> dict[str, str]:
    return {"type": tag, "payload": message.payload}


def parse_inbound(raw: object) -> ProtocolMessage | None:
    """Decode an inbound envelope; None for foreign or malformed messages."""
    if not isinstance(raw, Mapping):
        return None
    if raw.get("type") != INBOUND_TAG:
        return None
    payload = raw.get("payload")
    if not isinstance(payload, str):
        return None
    if not _matches(payload, INBOUND_EXACT, INBOUND_PREFIXES):
        return None
    return ProtocolMessage(payload)
