from __future__ import annotations

from collections.abc import Mapping

import pytest

from panelkit.runtime.scheduler import Scheduler
from sandshell.game.app.controller import ShellController
from sandshell.game.app.interaction import InteractionMachine
from sandshell.game.app.state import InteractionState
from sandshell.game.bridge.event_bridge import EventBridge
from sandshell.game.ui.panel_builder import ControlPanelBuilder


class RecordingChannel:
    """Message channel that keeps every posted envelope."""

    def __init__(self) -> None:
        self.envelopes: list[dict[str, str]] = []

    def post_message(self, envelope: Mapping[str, str]) -> None:
        self.envelopes.append(dict(envelope))

    @property
    def payloads(self) -> list[str]:
        return [envelope["payload"] for envelope in self.envelopes]

    def clear(self) -> None:
        self.envelopes.clear()


class FailingChannel:
    def post_message(self, envelope: Mapping[str, str]) -> None:
        raise OSError("simulation frame is gone")


class FakeFullscreen:
    def __init__(self) -> None:
        self.is_fullscreen = False
        self.calls = 0

    def toggle_fullscreen(self) -> bool:
        self.calls += 1
        self.is_fullscreen = not self.is_fullscreen
        return self.is_fullscreen


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def failing_channel() -> FailingChannel:
    return FailingChannel()


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def fullscreen() -> FakeFullscreen:
    return FakeFullscreen()


@pytest.fixture
def bridge(channel: RecordingChannel) -> EventBridge:
    return EventBridge(channel, trace=False)


@pytest.fixture
def machine_factory(bridge: EventBridge, scheduler: Scheduler, fullscreen: FakeFullscreen):
    def _make(**state_overrides) -> InteractionMachine:
        return InteractionMachine(
            bridge=bridge,
            panel=ControlPanelBuilder(),
            timers=scheduler,
            fullscreen=fullscreen,
            state=InteractionState(**state_overrides),
        )

    return _make


@pytest.fixture
def controller_factory(channel: RecordingChannel, scheduler: Scheduler, fullscreen: FakeFullscreen):
    def _make(**state_overrides) -> ShellController:
        return ShellController(
            channel=channel,
            timers=scheduler,
            fullscreen=fullscreen,
            state=InteractionState(**state_overrides),
            message_trace=False,
        )

    return _make
