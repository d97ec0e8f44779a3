"""Infrastructure layer: container, type registry and logging."""
