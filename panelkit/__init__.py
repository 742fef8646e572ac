"""Reusable runtime and UI geometry modules for embedded-panel shells."""
