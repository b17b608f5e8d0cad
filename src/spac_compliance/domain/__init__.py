"""Domain layer: enums, entities, exceptions and pure deadline services."""
