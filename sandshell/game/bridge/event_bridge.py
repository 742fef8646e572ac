"""Bidirectional translation between shell actions and simulation envelopes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from panelkit.runtime.debug_config import enabled_message_trace
from sandshell.game.bridge.protocol import ProtocolMessage, envelope, parse_inbound

logger = logging.getLogger(__name__)

# What a channel may raise when the simulation frame is gone, not yet loaded,
# or refuses the envelope. Anything else is a programming error and propagates.
SEND_FAILURES: tuple[type[Exception], ...] = (OSError, RuntimeError, ValueError, TypeError)


class MessageChannel(Protocol):
    """Transport towards the embedded simulation's message endpoint."""

    def post_message(self, envelope: Mapping[str, str]) -> None: ...


class EventBridge:
    """Fire-and-forget sender and tolerant receiver for protocol messages.

    Channel failures listed in `SEND_FAILURES` never escape `send`, and nothing
    malformed that arrives through `receive` is surfaced.
    """

    def __init__(self, channel: MessageChannel, *, trace: bool | None = None) -> None:
        self._channel = channel
        if trace is None:
            trace = enabled_message_trace()
        # Message lines are DEBUG unless tracing promotes them to INFO.
        self._trace_level = logging.INFO if trace else logging.DEBUG

    def send(self, message: ProtocolMessage) -> None:
        logger.log(self._trace_level, "SITE_EVENT: %s", message.payload)
        try:
            self._channel.post_message(envelope(message))
        except SEND_FAILURES:
            logger.warning("site_event_dropped payload=%s", message.payload, exc_info=True)

    def receive(self, raw_event: object) -> ProtocolMessage | None:
        message = parse_inbound(raw_event)
        if message is None:
            logger.debug("game_event_ignored raw=%r", raw_event)
            return None
        logger.log(self._trace_level, "GAME_EVENT: %s", message.payload)
        return message
