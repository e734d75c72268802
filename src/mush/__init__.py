"""mush: scaffold, fetch and run daily puzzle solutions."""

__version__ = "0.1.0"
