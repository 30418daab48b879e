"""Core data containers, transformations and errors."""
