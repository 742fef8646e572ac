"""Core domain models shared by layout, panel and interaction code."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

# Action-button highlight duration and the delay before the post-switch layout pass.
PULSE_SECONDS = 0.2
RELAYOUT_SETTLE_SECONDS = 0.1

MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 5

# Discrete brush size -> pixel diameter understood by the simulation.
BRUSH_PIXEL_SCALE: dict[int, int] = {1: 8, 2: 14, 3: 20, 4: 26, 5: 32}

# Upper bounds (exclusive) used to map inbound pixel sizes back to 1..4; larger is 5.
_BRUSH_PIXEL_BREAKPOINTS: tuple[tuple[int, int], ...] = ((9, 1), (15, 2), (21, 3), (27, 4))
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ButtonId(StrEnum):
    """Every control on the panel."""

    EMPTY = "Empty"
    STONE = "Stone"
    SAND = "Sand"
    WATER = "Water"
    SEED = "Seed"
    ANT = "Ant"
    WASP = "Wasp"
    ACID = "Acid"
    FIRE = "Fire"
    ICE = "Ice"
    PLAY = "Play"
    SIZE = "Size"
    ERASE = "Erase"
    GEN = "Gen"
    MENU = "Menu"


class ButtonKind(StrEnum):
    """Brush buttons are mutually exclusive; action buttons are not."""

    BRUSH = "Brush"
    ACTION = "Action"


BRUSH_IDS: tuple[ButtonId, ...] = (
    ButtonId.EMPTY,
    ButtonId.STONE,
    ButtonId.SAND,
    ButtonId.WATER,
    ButtonId.SEED,
    ButtonId.ANT,
    ButtonId.WASP,
    ButtonId.ACID,
    ButtonId.FIRE,
    ButtonId.ICE,
)

DEFAULT_BRUSH = ButtonId.SAND
DEFAULT_BRUSH_SIZE = 2


@dataclass(frozen=True, slots=True)
class SpriteFrame:
    """Inactive/active atlas coordinates of one visual state of a control."""

    inactive: tuple[int, int]
    active: tuple[int, int]

    def coords(self, is_active: bool) -> tuple[int, int]:
        return self.active if is_active else self.inactive


@dataclass(slots=True)
class ButtonSpec:
    """A panel control and its current activation flag."""

    id: ButtonId
    kind: ButtonKind
    sprite_frames: tuple[SpriteFrame, ...]
    is_active: bool = False

    @property
    def is_brush(self) -> bool:
        return self.kind is ButtonKind.BRUSH


def brush_pixels(size: int) -> int:
    """Return the pixel scale the simulation expects for a discrete size."""
    return BRUSH_PIXEL_SCALE[size]


def next_brush_size(size: int) -> int:
    """Increment brush size, wrapping past the maximum back to the minimum."""
    if size >= MAX_BRUSH_SIZE:
        return MIN_BRUSH_SIZE
    return size + 1


def brush_size_from_pixels(pixels: int) -> int:
    """Discretize a raw pixel brush size into 1..5."""
    for bound, size in _BRUSH_PIXEL_BREAKPOINTS:
        if pixels < bound:
            return size
    return MAX_BRUSH_SIZE


def brush_id_from_name(name: str) -> ButtonId | None:
    """Resolve a protocol brush name (any case) to a brush button id."""
    normalized = name.strip().lower()
    for brush_id in BRUSH_IDS:
        if brush_id.value.lower() == normalized:
            return brush_id
    return None


def parse_brush_pixels(raw: str) -> int | None:
    """Read the leading integer of an inbound pixel size (`"14.5"` and `"14px"` give 14)."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))
