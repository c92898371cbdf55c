"""Domain models and validation helpers."""
