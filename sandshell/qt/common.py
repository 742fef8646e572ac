"""Shared Qt UI constants."""

from __future__ import annotations

BACKGROUND = "#0b0b0b"
PANEL_BACKGROUND = "#1a1a1a"
GAME_PLACEHOLDER = "#000000"
OVERLAY = "#000000b0"
POPUP_BACKGROUND = "#000000"
TEXT = "#e5e7eb"

# Modal palette names mapped to painter colours.
MODAL_COLORS: dict[str, str] = {
    "red": "#ef4444",
    "green": "#22c55e",
    "white": "#f5f5f5",
}


def modal_color(name: str) -> str:
    return MODAL_COLORS.get(name, TEXT)
