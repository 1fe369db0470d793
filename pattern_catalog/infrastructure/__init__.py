"""Infrastructure layer - narration, logging, registries and shared services."""
