"""Infrastructure layer: in-memory execution and serialization."""
