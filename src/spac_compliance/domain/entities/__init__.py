"""Frozen domain entities."""
