"""Interaction state machine and layout-pass orchestration."""
