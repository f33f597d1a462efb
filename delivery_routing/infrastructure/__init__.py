"""Infrastructure layer - logging, registries and event publishing."""
