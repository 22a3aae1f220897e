"""Journal store: a flat directory of dated markdown entries.

Files are the source of truth. There is no index kept between calls; every
query re-reads the directory, which is small enough for a personal journal.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from jrni.errors import (
    DirectoryUnreadable,
    EntryFormatError,
    EntryNotFound,
    EntryUnwritable,
    FilenameCollision,
)
from jrni.journal import filenames
from jrni.journal.entry import Entry

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Outcome of decoding one journal file: an entry or the error it raised."""

    filename: str
    path: Path
    entry: Entry | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.ok:
            return str(self.path)
        return f"{self.path}: {self.error}"


class JournalStore:
    """Read and create entries in one journal directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def __iter__(self) -> Iterator[ScanResult]:
        return self.scan()

    # ── Scanning ──────────────────────────────────────────

    def _list_journal_files(self) -> list[str]:
        """Sorted journal filenames. Directory-level failures are fatal."""
        try:
            children = list(self.root.iterdir())
        except FileNotFoundError:
            raise DirectoryUnreadable(self.root, "no such directory") from None
        except NotADirectoryError:
            raise DirectoryUnreadable(self.root, "not a directory") from None
        except PermissionError:
            raise DirectoryUnreadable(self.root, "permission denied") from None
        except OSError as exc:
            raise DirectoryUnreadable(self.root, exc.strerror or str(exc)) from None

        names = [
            child.name
            for child in children
            if filenames.parse(child.name) is not None and child.is_file()
        ]
        return sorted(names)

    def _decode(self, filename: str) -> ScanResult:
        path = self.root / filename
        try:
            entry = Entry.from_text(filename, path.read_text(encoding="utf-8"))
        except (EntryFormatError, OSError, UnicodeDecodeError) as exc:
            logger.debug("Failed to decode %s: %s", path, exc)
            return ScanResult(filename, path, error=exc)
        return ScanResult(filename, path, entry=entry)

    def _decode_all(self, names: Iterable[str]) -> Iterator[ScanResult]:
        for name in names:
            yield self._decode(name)

    def scan(self) -> Iterator[ScanResult]:
        """Decode every journal file in filename (= creation date) order.

        The directory is listed right away so an unreadable journal raises
        DirectoryUnreadable here; files are decoded lazily as the iterator is
        consumed. A bad file yields a failed ScanResult instead of stopping
        the scan. Call again to start over.
        """
        return self._decode_all(self._list_journal_files())

    def entries(self) -> Iterator[Entry]:
        """Successfully decoded entries; failures are logged and skipped."""
        for result in self.scan():
            if result.ok:
                yield result.entry
            else:
                logger.warning("Skipping %s", result.describe())

    def errors(self) -> list[ScanResult]:
        return [result for result in self.scan() if not result.ok]

    # ── Queries ───────────────────────────────────────────

    def find_by_id(self, entry_id: str) -> Entry:
        """First entry in filename order whose id matches.

        Ids are not required to be unique, so the earliest file wins.
        """
        for entry in self.entries():
            if entry.id == entry_id:
                return entry
        raise EntryNotFound(entry_id)

    def ids(self) -> list[tuple[str, Entry]]:
        return [(entry.id, entry) for entry in self.entries() if entry.id]

    def id_in_use(self, entry_id: str) -> bool:
        return any(entry.id == entry_id for entry in self.entries())

    def tag_counts(self) -> Counter[str]:
        """Number of entries carrying each tag."""
        counts: Counter[str] = Counter()
        for entry in self.entries():
            counts.update(entry.tags)
        return counts

    # ── Writing ───────────────────────────────────────────

    def path_for(self, entry: Entry) -> Path:
        return self.root / entry.filename

    def create(
        self,
        title: str,
        *,
        tags: Iterable[str] = (),
        body: str = "",
        id: str | None = None,
        pubdate: datetime | None = None,
    ) -> Entry:
        """Write a new entry file. Never overwrites an existing one.

        Raises:
            InvalidTitle: the title has nothing to slugify.
            InvalidHeaderValue: a tag or the id spans more than one line.
            DirectoryUnreadable: the journal directory does not exist.
            FilenameCollision: an entry with the same date and slug exists.
            EntryUnwritable: the file could not be created or written.
        """
        if not self.root.is_dir():
            raise DirectoryUnreadable(self.root, "no such directory")

        entry = Entry.new(title, tags=tags, id=id, body=body, pubdate=pubdate)
        path = self.path_for(entry)
        # a failed encode must leave nothing on disk
        text = entry.to_text()
        try:
            with path.open("x", encoding="utf-8") as fh:
                fh.write(text)
        except FileExistsError:
            raise FilenameCollision(path) from None
        except OSError as exc:
            raise EntryUnwritable(path, exc.strerror or str(exc)) from None

        logger.info("Created %s", path)
        return entry
