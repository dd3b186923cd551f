"""Core helpers: configuration, security, clock and locking."""
