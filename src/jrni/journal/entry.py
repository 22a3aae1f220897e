"""In-memory journal entry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

from jrni.errors import InvalidHeaderValue
from jrni.journal import codec, filenames


def _check_single_line(field_name: str, value: str) -> None:
    # splitlines is what the decoder uses, so any separator it knows is rejected
    if value.splitlines() != [value]:
        raise InvalidHeaderValue(field_name, value)


@dataclass
class Entry:
    """One journal file: parsed header, body and on-disk filename.

    ``title`` is what the filename slug was built from. Decoded entries get
    the slug back from the filename, since the header does not store it.
    """

    title: str
    pubdate: datetime
    tags: tuple[str, ...] = ()
    id: str | None = None
    body: str = ""
    filename: str = ""
    extra: dict[str, str] = field(default_factory=dict)

    @property
    def day(self) -> date:
        return self.pubdate.date()

    @classmethod
    def new(
        cls,
        title: str,
        *,
        tags: Iterable[str] = (),
        id: str | None = None,
        body: str = "",
        pubdate: datetime | None = None,
    ) -> Entry:
        """Build a fresh entry stamped with the current local time.

        The body is laid out as the file will hold it: a blank line after the
        separator, then the text, newline-terminated.
        """
        if pubdate is None:
            pubdate = datetime.now().astimezone()
        pubdate = pubdate.replace(microsecond=pubdate.microsecond // 1000 * 1000)
        text = body if not body or body.endswith("\n") else body + "\n"
        tags = codec.normalize_tags(tags)
        id = (id or "").strip() or None
        for tag in tags:
            _check_single_line("tag", tag)
        if id is not None:
            _check_single_line("id", id)
        return cls(
            title=title,
            pubdate=pubdate,
            tags=tags,
            id=id,
            body=f"\n{text}",
            filename=filenames.generate(pubdate.date(), title),
        )

    @classmethod
    def from_text(cls, filename: str, raw_text: str) -> Entry:
        """Decode a file's contents. Raises EntryFormatError subclasses."""
        post = codec.decode(raw_text)
        meta = post.metadata
        parsed = filenames.parse(filename)
        return cls(
            title=parsed.slug if parsed else Path(filename).stem,
            pubdate=meta["pubdate"],
            tags=meta["tags"],
            id=meta["id"],
            body=post.content,
            filename=filename,
            extra={k: v for k, v in meta.items() if k not in codec.KNOWN_KEYS},
        )

    def to_text(self) -> str:
        return codec.encode(self)
