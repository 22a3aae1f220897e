"""jrni: a journal of plain-text markdown entries with a small header."""

__version__ = "0.1.0"
