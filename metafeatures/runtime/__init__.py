"""Call-scoped runtime helpers (randomness)."""
