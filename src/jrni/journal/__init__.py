"""Journal entries on disk.

Layout:
    $JRNI_PATH/
    ├── 2020-04-05-first-entry.md     # header lines, "---", body
    ├── 2020-04-06-another-one.md
    └── notes.txt                     # not YYYY-MM-DD-*.md, ignored

Entries are decoded by ``codec``, named by ``filenames`` and queried through
``JournalStore``.
"""

from jrni.journal.entry import Entry
from jrni.journal.store import JournalStore, ScanResult

__all__ = ["Entry", "JournalStore", "ScanResult"]
