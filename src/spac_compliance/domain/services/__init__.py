"""Pure deadline-computation services."""
