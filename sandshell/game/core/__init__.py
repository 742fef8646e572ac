"""Core shell models."""
