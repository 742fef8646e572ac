from __future__ import annotations

import pytest

from sandshell.game.ui.layout_resolver import LayoutResolver, resolve_layout
from sandshell.game.ui.layout_table import LayoutVariant


@pytest.mark.parametrize(
    ("width", "height", "variant"),
    [
        (1000, 400, LayoutVariant.FULL_HORIZONTAL),
        (1000, 800, LayoutVariant.SMALL_HORIZONTAL),
        (400, 1000, LayoutVariant.FULL_VERTICAL),
        (800, 1000, LayoutVariant.SMALL_VERTICAL),
    ],
)
def test_resolve_layout_known_viewports(width: int, height: int, variant: LayoutVariant) -> None:
    assert resolve_layout(width, height) is variant


@pytest.mark.parametrize("scale", [0.1, 0.5, 3.0, 17.0])
@pytest.mark.parametrize(("width", "height"), [(1000, 400), (1000, 800), (400, 1000), (800, 1000), (1499, 1000)])
def test_resolve_layout_is_scale_invariant(width: int, height: int, scale: float) -> None:
    assert resolve_layout(width * scale, height * scale) is resolve_layout(width, height)


def test_resolve_layout_threshold_and_square() -> None:
    assert resolve_layout(1500, 1000) is LayoutVariant.FULL_HORIZONTAL
    assert resolve_layout(1499, 1000) is LayoutVariant.SMALL_HORIZONTAL
    assert resolve_layout(600, 600) is LayoutVariant.SMALL_VERTICAL


@pytest.mark.parametrize(("width", "height"), [(0, 0), (0, 500), (500, 0), (-10, 20)])
def test_resolve_layout_unmeasured_falls_back_to_full_horizontal(width: int, height: int) -> None:
    assert resolve_layout(width, height) is LayoutVariant.FULL_HORIZONTAL


def test_layout_resolver_reports_changes_only() -> None:
    resolver = LayoutResolver()
    first = resolver.update(1000, 400)
    assert first.previous is None
    assert first.changed
    same = resolver.update(2000, 800)
    assert not same.changed
    turned = resolver.update(400, 1000)
    assert turned.previous is LayoutVariant.FULL_HORIZONTAL
    assert turned.current is LayoutVariant.FULL_VERTICAL
    assert resolver.current is LayoutVariant.FULL_VERTICAL
