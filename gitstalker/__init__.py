"""Profile a GitHub developer from their public repositories and commits."""

__version__ = "0.1.0"