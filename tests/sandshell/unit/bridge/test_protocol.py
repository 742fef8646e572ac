from __future__ import annotations

import pytest

from sandshell.game.bridge.protocol import (
    ProtocolMessage,
    UnknownMessageError,
    brush_select,
    brush_size,
    envelope,
    outbound,
    parse_inbound,
    world_debug,
    world_run,
)


def test_outbound_builders_produce_vocabulary_strings() -> None:
    assert brush_select("Sand").payload == "brush_select:sand"
    assert brush_size(20).payload == "brush_size:20"
    assert world_debug(True).payload == "world:debug:on"
    assert world_debug(False).payload == "world:debug:off"
    assert world_run(True).payload == "world:start"
    assert world_run(False).payload == "world:stop"


def test_outbound_rejects_unknown_payload() -> None:
    with pytest.raises(UnknownMessageError):
        outbound("world:explode")
    with pytest.raises(UnknownMessageError):
        outbound("game:fullscreen")


def test_envelope_shape() -> None:
    assert envelope(outbound("world:gen")) == {"type": "site-event", "payload": "world:gen"}


def test_message_verb_and_argument() -> None:
    message = ProtocolMessage("brush_size: 14")
    assert message.verb == "brush_size:"
    assert message.argument == "14"
    exact = ProtocolMessage("world:start")
    assert exact.verb == "world:start"
    assert exact.argument == ""


@pytest.mark.parametrize(
    "payload",
    ["game:fullscreen", "world:start", "world:stop", "world:debug:on", "brush_select:ice", "brush_size:26"],
)
def test_parse_inbound_accepts_vocabulary(payload: str) -> None:
    message = parse_inbound({"type": "game-event", "payload": payload})
    assert message == ProtocolMessage(payload)


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "world:start",
        {"payload": "world:start"},
        {"type": "site-event", "payload": "world:start"},
        {"type": "game-event"},
        {"type": "game-event", "payload": 42},
        {"type": "game-event", "payload": "world:erase"},
        {"type": "game-event", "payload": "unrelated:thing"},
    ],
)
def test_parse_inbound_drops_malformed_or_foreign(raw: object) -> None:
    assert parse_inbound(raw) is None
