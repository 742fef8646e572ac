"""Region geometry for the main container: game window, panels, popup."""

from __future__ import annotations

import math
from dataclasses import dataclass

from panelkit.ui_runtime.geometry import Rect, Size
from sandshell.game.ui.layout_table import ContainerFlow, GameSizing, LayoutSpec, Region

# Minimum control-strip thickness, in sprite units.
MIN_STRIP_SPRITES = 4
POPUP_FRAME_FRACTION = 0.9


@dataclass(frozen=True, slots=True)
class RegionGeometry:
    """Resolved rectangles of every region, in container coordinates."""

    container: Rect
    game_window: Rect
    panels: dict[Region, Rect]
    strip_clamped: bool = False

    def panel(self, region: Region) -> Rect | None:
        return self.panels.get(region)


def strip_thickness(sprite_size: int) -> int:
    return MIN_STRIP_SPRITES * sprite_size


def compute_regions(spec: LayoutSpec, container: Size, *, sprite_size: int) -> RegionGeometry | None:
    """Lay regions out along the container flow.

    Returns None when the container is not measurable yet.
    """
    if not container.is_measurable:
        return None
    horizontal = spec.container_flow is ContainerFlow.ROW
    main = container.w if horizontal else container.h
    cross = container.h if horizontal else container.w
    panel_regions = [region for region in spec.element_order if region is not Region.GAME_WINDOW]

    clamped = False
    if spec.game_sizing is GameSizing.CROSS_SQUARE:
        game_extent = min(cross, main)
        strip_extent = main - game_extent
    else:
        min_strip = strip_thickness(sprite_size)
        # Clamp when the strip minimum would leave a game area longer than it is wide.
        clamped = cross < main - min_strip
        if clamped:
            game_extent = float(math.floor(cross))
            strip_extent = float(math.floor(main - cross))
        else:
            strip_extent = float(min(min_strip, main))
            game_extent = main - strip_extent

    panel_extent = strip_extent / len(panel_regions) if panel_regions else 0.0
    rects: dict[Region, Rect] = {}
    offset = 0.0
    for region in spec.element_order:
        extent = game_extent if region is Region.GAME_WINDOW else panel_extent
        if horizontal:
            rects[region] = Rect(offset, 0.0, extent, container.h)
        else:
            rects[region] = Rect(0.0, offset, container.w, extent)
        offset += extent

    game_window = rects.pop(Region.GAME_WINDOW)
    return RegionGeometry(
        container=Rect(0.0, 0.0, container.w, container.h),
        game_window=game_window,
        panels=rects,
        strip_clamped=clamped,
    )


def game_square(game_window: Rect) -> Rect | None:
    """Largest floored square centred in the game window, or None if unmeasured."""
    if not game_window.is_measurable:
        return None
    side = max(0, math.floor(min(game_window.w, game_window.h)))
    return game_window.centered(side, side)


def popup_rect(game_frame: Rect) -> Rect:
    """Modal window: 90% of the game frame, centred on it."""
    w = math.floor(game_frame.w * POPUP_FRAME_FRACTION)
    h = math.floor(game_frame.h * POPUP_FRAME_FRACTION)
    left = math.floor(game_frame.x + (game_frame.w - w) / 2)
    top = math.floor(game_frame.y + (game_frame.h - h) / 2)
    return Rect(left, top, w, h)


def popup_option_rects(popup: Rect, count: int, *, stacked: bool) -> tuple[Rect, ...]:
    """Option button rectangles inside a popup window.

    Stacked options (menus) fill the window top to bottom; side-by-side
    options (confirmations) share the bottom third under the message.
    """
    if count <= 0 or not popup.is_measurable:
        return ()
    pad = popup.w * 0.05
    inner = Rect(popup.x + pad, popup.y + pad, popup.w - 2 * pad, popup.h - 2 * pad)
    if stacked:
        gap = inner.h * 0.02
        h = (inner.h - gap * (count - 1)) / count
        return tuple(Rect(inner.x, inner.y + i * (h + gap), inner.w, h) for i in range(count))
    band_h = inner.h / 3
    gap = inner.w * 0.04
    w = (inner.w - gap * (count - 1)) / count
    top = inner.y + inner.h - band_h
    return tuple(Rect(inner.x + i * (w + gap), top, w, band_h) for i in range(count))
