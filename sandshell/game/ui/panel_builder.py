"""Materializes button grids for the current layout and renders their sprites."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from panelkit.ui_runtime.geometry import Rect, Size
from panelkit.ui_runtime.grid_layout import GridLayout
from panelkit.ui_runtime.sprite_atlas import SpriteAtlas, SpritePlacement
from sandshell.game.core.models import ButtonId, ButtonSpec
from sandshell.game.ui.layout_table import (
    LAYOUT_TABLE,
    LayoutSpec,
    LayoutVariant,
    PanelSpec,
    Region,
    validate_layout_table,
)
from sandshell.game.ui.regions import RegionGeometry, compute_regions, game_square, popup_rect
from sandshell.game.ui.sprite_sheet import ATLAS

logger = logging.getLogger(__name__)

_EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)


@dataclass(slots=True)
class PanelSlot:
    """One grid cell; carries a button when `button_id` is set."""

    index: int
    button_id: ButtonId | None
    rect: Rect = _EMPTY_RECT
    background: SpritePlacement | None = None

    @property
    def width(self) -> float:
        return self.rect.w

    @property
    def height(self) -> float:
        return self.rect.h


@dataclass(slots=True)
class PanelGrid:
    """Mutable button grid bound to one container region."""

    region: Region
    columns: int = 0
    rows: int = 0
    slots: list[PanelSlot] = field(default_factory=list)
    rect: Rect = _EMPTY_RECT
    hidden: bool = True

    def grid_layout(self) -> GridLayout | None:
        if self.columns <= 0 or self.rows <= 0:
            return None
        return GridLayout(rect=self.rect, columns=self.columns, rows=self.rows)

    def slot_for(self, button_id: ButtonId) -> PanelSlot | None:
        for slot in self.slots:
            if slot.button_id is button_id:
                return slot
        return None

    def button_at(self, px: float, py: float) -> ButtonId | None:
        layout = self.grid_layout()
        if self.hidden or layout is None:
            return None
        index = layout.index_at(px, py)
        if index is None:
            return None
        return self.slots[index].button_id


def build_grid(grid: PanelGrid, spec: PanelSpec) -> None:
    """Clear `grid` and instantiate one slot per cell of `spec`."""
    grid.slots.clear()
    grid.columns = spec.columns
    grid.rows = spec.rows
    grid.slots.extend(
        PanelSlot(index=index, button_id=spec.button_slots[index]) for index in range(spec.cell_count)
    )
    grid.hidden = False


def clear_grid(grid: PanelGrid) -> None:
    grid.slots.clear()
    grid.columns = 0
    grid.rows = 0
    grid.rect = _EMPTY_RECT
    grid.hidden = True


def resolve_frame_index(button: ButtonSpec, *, brush_size: int, is_running: bool) -> int:
    """Pick the visual state of a control from interaction state."""
    if button.id is ButtonId.PLAY:
        return 1 if is_running else 0
    if button.id is ButtonId.SIZE:
        return brush_size - 1
    return 0


class ControlPanelBuilder:
    """Owns panel grids and region geometry for the current layout variant."""

    def __init__(
        self,
        *,
        table: Mapping[LayoutVariant, LayoutSpec] = LAYOUT_TABLE,
        atlas: SpriteAtlas = ATLAS,
        known_buttons: Iterable[ButtonId] = tuple(ButtonId),
    ) -> None:
        validate_layout_table(table, known_buttons)
        self._table = table
        self._atlas = atlas
        self.panel_a = PanelGrid(Region.PANEL_A)
        self.panel_b = PanelGrid(Region.PANEL_B)
        self._variant: LayoutVariant | None = None
        self._regions: RegionGeometry | None = None
        self._game_frame: Rect | None = None
        self._popup: Rect | None = None

    @property
    def atlas(self) -> SpriteAtlas:
        return self._atlas

    @property
    def variant(self) -> LayoutVariant | None:
        return self._variant

    @property
    def regions(self) -> RegionGeometry | None:
        return self._regions

    @property
    def game_frame(self) -> Rect | None:
        return self._game_frame

    @property
    def popup(self) -> Rect | None:
        return self._popup

    def spec(self) -> LayoutSpec | None:
        if self._variant is None:
            return None
        return self._table[self._variant]

    def grids(self) -> tuple[PanelGrid, ...]:
        """Visible grids, panel A first."""
        return tuple(grid for grid in (self.panel_a, self.panel_b) if not grid.hidden)

    def rebuild(self, variant: LayoutVariant) -> None:
        """Rebuild every grid for a new layout variant."""
        spec = self._table[variant]
        build_grid(self.panel_a, spec.panel_a)
        if spec.panel_b is not None:
            build_grid(self.panel_b, spec.panel_b)
        else:
            clear_grid(self.panel_b)
        self._variant = variant
        logger.debug(
            "panel_rebuilt variant=%s panels=%d border=%s",
            variant.value,
            len(spec.panels()),
            spec.border_class,
        )

    def apply_geometry_constraints(self, container: Size) -> RegionGeometry | None:
        """Resolve region rectangles for the container; no-op while unmeasured."""
        spec = self.spec()
        if spec is None:
            return None
        regions = compute_regions(spec, container, sprite_size=self._atlas.sprite_size)
        if regions is None:
            return None
        self._regions = regions
        for grid in self.grids():
            grid.rect = regions.panel(grid.region) or _EMPTY_RECT
            self._layout_slots(grid)
        return regions

    def apply_game_square(self) -> Rect | None:
        """Fit the game frame as a square inside the game window."""
        if self._regions is None:
            return None
        square = game_square(self._regions.game_window)
        if square is None:
            return None
        self._game_frame = square
        return square

    def render(self, buttons: Iterable[ButtonSpec], *, brush_size: int, is_running: bool) -> int:
        """Place every visible button's current sprite. Returns rendered count."""
        rendered = 0
        for button in buttons:
            slot = self.slot_for(button.id)
            if slot is None:
                continue
            index = resolve_frame_index(button, brush_size=brush_size, is_running=is_running)
            frame_x, frame_y = button.sprite_frames[index].coords(button.is_active)
            self._atlas.place(slot, frame_x, frame_y)
            rendered += 1
        return rendered

    def position_popup(self) -> Rect | None:
        if self._game_frame is None:
            return None
        self._popup = popup_rect(self._game_frame)
        return self._popup

    def clear_popup(self) -> None:
        self._popup = None

    def slot_for(self, button_id: ButtonId) -> PanelSlot | None:
        for grid in self.grids():
            slot = grid.slot_for(button_id)
            if slot is not None:
                return slot
        return None

    def button_at(self, px: float, py: float) -> ButtonId | None:
        for grid in self.grids():
            button_id = grid.button_at(px, py)
            if button_id is not None:
                return button_id
        return None

    @staticmethod
    def _layout_slots(grid: PanelGrid) -> None:
        layout = grid.grid_layout()
        if layout is None:
            return
        for slot in grid.slots:
            slot.rect = layout.cell_rect(slot.index)
