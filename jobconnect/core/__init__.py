"""Core utilities: configuration-aware security, sessions, errors, logging."""
