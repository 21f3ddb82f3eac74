"""Utility helpers - pure functions over entities."""
