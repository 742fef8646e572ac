"""Declarative description of the four control-panel layout variants."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from sandshell.game.core.models import ButtonId

B = ButtonId


class LayoutVariant(StrEnum):
    """Aspect-ratio/orientation buckets."""

    FULL_VERTICAL = "FullVertical"
    SMALL_VERTICAL = "SmallVertical"
    FULL_HORIZONTAL = "FullHorizontal"
    SMALL_HORIZONTAL = "SmallHorizontal"


class Region(StrEnum):
    """Top-level regions of the main container."""

    GAME_WINDOW = "GameWindow"
    PANEL_A = "ButtonPanelA"
    PANEL_B = "ButtonPanelB"


class ContainerFlow(StrEnum):
    ROW = "row"
    COLUMN = "column"


class GameSizing(StrEnum):
    """How the game window claims space along the container flow.

    CROSS_SQUARE: square sized by the cross-axis extent; panels share the rest.
    FLEX: panel strip takes its constrained thickness; game takes the rest.
    """

    CROSS_SQUARE = "cross_square"
    FLEX = "flex"


@dataclass(frozen=True, slots=True)
class PanelSpec:
    """One button grid; `None` marks an empty cell."""

    columns: int
    rows: int
    button_slots: tuple[ButtonId | None, ...]

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    def button_ids(self) -> tuple[ButtonId, ...]:
        return tuple(slot for slot in self.button_slots if slot is not None)


@dataclass(frozen=True, slots=True)
class LayoutSpec:
    """Complete immutable definition of one layout variant."""

    panel_a: PanelSpec
    panel_b: PanelSpec | None
    container_flow: ContainerFlow
    element_order: tuple[Region, ...]
    game_sizing: GameSizing
    border_class: str

    def panels(self) -> tuple[tuple[Region, PanelSpec], ...]:
        if self.panel_b is None:
            return ((Region.PANEL_A, self.panel_a),)
        return ((Region.PANEL_A, self.panel_a), (Region.PANEL_B, self.panel_b))


class LayoutTableError(ValueError):
    """Raised when the layout table references unknown variants or buttons."""


LAYOUT_TABLE: dict[LayoutVariant, LayoutSpec] = {
    LayoutVariant.FULL_VERTICAL: LayoutSpec(
        panel_a=PanelSpec(
            columns=4,
            rows=4,
            button_slots=(
                B.SIZE, B.PLAY, B.GEN, B.ERASE,
                B.EMPTY, B.STONE, B.SAND, B.WATER,
                B.SEED, B.ANT, B.WASP, B.ACID,
                B.FIRE, B.ICE, None, B.MENU,
            ),
        ),
        panel_b=None,
        container_flow=ContainerFlow.COLUMN,
        element_order=(Region.GAME_WINDOW, Region.PANEL_A),
        game_sizing=GameSizing.CROSS_SQUARE,
        border_class="border-full-vertical",
    ),
    LayoutVariant.SMALL_VERTICAL: LayoutSpec(
        panel_a=PanelSpec(
            columns=8,
            rows=2,
            button_slots=(
                B.EMPTY, B.STONE, B.SAND, B.WATER, B.SEED, B.GEN, B.ERASE, B.SIZE,
                B.ANT, B.WASP, B.ACID, B.FIRE, B.ICE, B.PLAY, None, B.MENU,
            ),
        ),
        panel_b=None,
        container_flow=ContainerFlow.COLUMN,
        element_order=(Region.GAME_WINDOW, Region.PANEL_A),
        game_sizing=GameSizing.FLEX,
        border_class="border-small-vertical",
    ),
    LayoutVariant.FULL_HORIZONTAL: LayoutSpec(
        panel_a=PanelSpec(
            columns=2,
            rows=5,
            button_slots=(
                B.EMPTY, B.STONE,
                B.SAND, B.WATER,
                B.SEED, B.ANT,
                B.WASP, B.ACID,
                B.FIRE, B.ICE,
            ),
        ),
        panel_b=PanelSpec(
            columns=2,
            rows=5,
            button_slots=(
                B.PLAY, B.SIZE,
                B.GEN, B.ERASE,
                None, None,
                None, None,
                None, B.MENU,
            ),
        ),
        container_flow=ContainerFlow.ROW,
        element_order=(Region.PANEL_A, Region.GAME_WINDOW, Region.PANEL_B),
        game_sizing=GameSizing.CROSS_SQUARE,
        border_class="border-full-horizontal",
    ),
    LayoutVariant.SMALL_HORIZONTAL: LayoutSpec(
        panel_a=PanelSpec(
            columns=2,
            rows=8,
            button_slots=(
                B.EMPTY, B.STONE,
                B.SAND, B.WATER,
                B.SEED, B.ANT,
                B.WASP, B.ACID,
                B.FIRE, B.ICE,
                B.SIZE, B.PLAY,
                B.GEN, B.ERASE,
                B.MENU, None,
            ),
        ),
        panel_b=None,
        container_flow=ContainerFlow.ROW,
        element_order=(Region.PANEL_A, Region.GAME_WINDOW),
        game_sizing=GameSizing.FLEX,
        border_class="border-small-horizontal",
    ),
}


def validate_layout_table(
    table: Mapping[LayoutVariant, LayoutSpec],
    known_buttons: Iterable[ButtonId],
) -> None:
    """Fail fast on configuration defects in a layout table."""
    known = set(known_buttons)
    missing = [variant.value for variant in LayoutVariant if variant not in table]
    if missing:
        raise LayoutTableError(f"layout table is missing variants: {', '.join(missing)}")
    for variant, spec in table.items():
        if not isinstance(variant, LayoutVariant):
            raise LayoutTableError(f"unknown layout variant: {variant!r}")
        _validate_regions(variant, spec)
        seen: set[ButtonId] = set()
        for region, panel in spec.panels():
            _validate_panel(variant, region, panel, known)
            duplicates = seen.intersection(panel.button_ids())
            if duplicates:
                names = ", ".join(sorted(str(button_id) for button_id in duplicates))
                raise LayoutTableError(f"{variant}: buttons placed twice: {names}")
            seen.update(panel.button_ids())


def _validate_regions(variant: LayoutVariant, spec: LayoutSpec) -> None:
    order = spec.element_order
    if len(set(order)) != len(order):
        raise LayoutTableError(f"{variant}: duplicate regions in element order")
    expected = {Region.GAME_WINDOW, Region.PANEL_A}
    if spec.panel_b is not None:
        expected.add(Region.PANEL_B)
    if set(order) != expected:
        raise LayoutTableError(
            f"{variant}: element order {[r.value for r in order]} does not match its panels"
        )


def _validate_panel(
    variant: LayoutVariant,
    region: Region,
    panel: PanelSpec,
    known: set[ButtonId],
) -> None:
    if panel.columns <= 0 or panel.rows <= 0:
        raise LayoutTableError(f"{variant}/{region}: grid must have positive tracks")
    if len(panel.button_slots) != panel.cell_count:
        raise LayoutTableError(
            f"{variant}/{region}: {len(panel.button_slots)} slots for a "
            f"{panel.columns}x{panel.rows} grid"
        )
    for slot in panel.button_ids():
        if slot not in known:
            raise LayoutTableError(f"{variant}/{region}: unknown button id {slot!r}")
