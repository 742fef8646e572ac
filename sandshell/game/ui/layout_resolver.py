"""Viewport classification into layout variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sandshell.game.ui.layout_table import LayoutVariant

SMALL_FULL_THRESHOLD = 1.5

logger = logging.getLogger(__name__)


def resolve_layout(width: float, height: float) -> LayoutVariant:
    """Classify a viewport by orientation and aspect ratio.

    Unmeasured viewports fall back to `FullHorizontal`.
    """
    if width <= 0 or height <= 0:
        return LayoutVariant.FULL_HORIZONTAL
    is_horizontal = width > height
    ratio = max(width, height) / min(width, height)
    if ratio < SMALL_FULL_THRESHOLD:
        return LayoutVariant.SMALL_HORIZONTAL if is_horizontal else LayoutVariant.SMALL_VERTICAL
    return LayoutVariant.FULL_HORIZONTAL if is_horizontal else LayoutVariant.FULL_VERTICAL


@dataclass(frozen=True, slots=True)
class LayoutTransition:
    """Result of one resolver pass."""

    previous: LayoutVariant | None
    current: LayoutVariant

    @property
    def changed(self) -> bool:
        return self.previous is not self.current


class LayoutResolver:
    """Keeps the current variant and reports transitions between passes."""

    def __init__(self) -> None:
        self._current: LayoutVariant | None = None

    @property
    def current(self) -> LayoutVariant | None:
        return self._current

    def update(self, width: float, height: float) -> LayoutTransition:
        variant = resolve_layout(width, height)
        transition = LayoutTransition(previous=self._current, current=variant)
        if transition.changed:
            logger.info(
                "layout_changed from=%s to=%s",
                self._current.value if self._current is not None else "NoLayout",
                variant.value,
            )
        self._current = variant
        return transition
