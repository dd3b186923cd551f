"""Script Hub server: script sharing backend with role-gated lifecycle."""

__version__ = "0.1.0"
