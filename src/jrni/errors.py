"""Exception hierarchy for jrni.

Everything raised on purpose inherits from JrniError so the CLI can turn it
into a one-line message. Messages always name the offending file or value,
since entries are meant to be repaired by hand.
"""

from __future__ import annotations

from pathlib import Path


class JrniError(Exception):
    """Base class for all jrni errors."""


# ── Per-file decode errors (recovered during scans) ─────────


class EntryFormatError(JrniError):
    """An entry file does not follow the frontmatter format."""


class MissingSeparator(EntryFormatError):
    def __init__(self) -> None:
        super().__init__("no '---' line terminating the header")


class MalformedHeaderLine(EntryFormatError):
    def __init__(self, lineno: int, line: str) -> None:
        self.lineno = lineno
        self.line = line
        super().__init__(f"header line {lineno} is not 'key: value': {line!r}")


class InvalidTimestamp(EntryFormatError):
    def __init__(self, value: str | None) -> None:
        self.value = value
        if value is None:
            msg = "pubdate is missing"
        else:
            msg = f"pubdate {value!r} does not match 'YYYY-MM-DD HH:MM:SS.mmm +HHMM'"
        super().__init__(msg)


# ── Operation errors (fatal for the command in progress) ────


class InvalidTitle(JrniError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"title {title!r} has no letters or digits to build a filename from")


class InvalidHeaderValue(JrniError):
    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {value!r} must fit on one header line")


class EntryUnwritable(JrniError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot write entry {path}: {reason}")


class FilenameCollision(JrniError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"file with path {path} already exists; choose a different title")


class EntryNotFound(JrniError):
    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"Couldn't find entry by id '{entry_id}'")


class DirectoryUnreadable(JrniError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read journal directory {path}: {reason}")


class ConfigurationError(JrniError):
    """Raised when required settings (like the journal path) are missing."""


class EditorError(JrniError):
    """Raised when the editor command cannot be started."""
