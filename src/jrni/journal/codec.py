"""Frontmatter codec for journal entries.

An entry file is a block of ``key: value`` lines, a line holding exactly
``---``, and then the body::

    tags: tag1,tag2
    id: optional-id
    pubdate: 2020-04-05 12:41:17.111 -0400
    ---

    body text

There is no opening delimiter, so this is not the YAML frontmatter that
python-frontmatter handles out of the box. ``JournalHandler`` plugs the
format into the library instead, and decoded entries travel as a
``frontmatter.Post``.

Recognized keys are ``tags``, ``id`` and ``pubdate``. Any other key is kept
as an opaque string and written back after ``pubdate`` on encode.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

import frontmatter
from frontmatter.default_handlers import BaseHandler

from jrni.errors import InvalidTimestamp, MalformedHeaderLine, MissingSeparator

if TYPE_CHECKING:
    from jrni.journal.entry import Entry

SEPARATOR = "---"
KNOWN_KEYS = ("tags", "id", "pubdate")

PUBDATE_FORMAT = "%Y-%m-%d %H:%M:%S.%f %z"
# strptime alone would accept 1-6 fractional digits and "+04:00" offsets
_PUBDATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3} [+-]\d{4}$")


# ── Field helpers ─────────────────────────────────────────


def format_pubdate(value: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS.mmm +HHMM``.

    Sub-millisecond precision is truncated. Naive datetimes and offsets that
    are not whole minutes are rejected, since neither fits ``+HHMM``.
    """
    offset = value.utcoffset()
    if offset is None:
        raise ValueError(f"pubdate must be timezone-aware, got {value!r}")
    if offset % timedelta(minutes=1):
        raise ValueError(f"pubdate offset {offset} is not a whole number of minutes")
    return f"{value:%Y-%m-%d %H:%M:%S}.{value.microsecond // 1000:03d} {value:%z}"


def parse_pubdate(value: str | None) -> datetime:
    if value is None:
        raise InvalidTimestamp(None)
    if not _PUBDATE_RE.match(value):
        raise InvalidTimestamp(value)
    try:
        return datetime.strptime(value, PUBDATE_FORMAT)
    except ValueError:
        # well-formed but impossible, e.g. month 13 or offset +9900
        raise InvalidTimestamp(value) from None


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Split on commas, trim, drop empties and duplicates; keep first-seen order."""
    seen: dict[str, None] = {}
    for raw in tags:
        for part in raw.split(","):
            tag = part.strip()
            if tag:
                seen.setdefault(tag, None)
    return tuple(seen)


# ── python-frontmatter handler ────────────────────────────


class JournalHandler(BaseHandler):
    """Header-then-``---`` format, as a python-frontmatter handler."""

    FM_BOUNDARY = re.compile(r"^---\r?$", re.MULTILINE)

    def detect(self, text: str) -> bool:
        return self.FM_BOUNDARY.search(text) is not None

    def split(self, text: str) -> tuple[str, str]:
        """Return (header, body). The body keeps everything after the separator line."""
        match = self.FM_BOUNDARY.search(text)
        if match is None:
            raise MissingSeparator()
        header = text[: match.start()]
        body = text[match.end() :]
        if body.startswith("\n"):
            body = body[1:]
        return header, body

    def load(self, fm: str) -> dict[str, Any]:
        metadata: dict[str, Any] = {}
        for lineno, line in enumerate(fm.splitlines(), start=1):
            key, sep, value = line.partition(":")
            if not sep or not key.strip():
                raise MalformedHeaderLine(lineno, line)
            metadata[key.strip()] = value.strip()

        metadata["tags"] = normalize_tags([metadata.get("tags", "")])
        metadata["id"] = metadata.get("id") or None
        metadata["pubdate"] = parse_pubdate(metadata.get("pubdate"))
        return metadata

    def export(self, metadata: dict[str, Any], **kwargs: Any) -> str:
        lines = [f"tags: {','.join(metadata.get('tags', ()))}".rstrip()]
        if metadata.get("id"):
            lines.append(f"id: {metadata['id']}")
        lines.append(f"pubdate: {format_pubdate(metadata['pubdate'])}")
        for key, value in metadata.items():
            if key not in KNOWN_KEYS:
                lines.append(f"{key}: {value}")
        return "\n".join(lines)

    def format(self, post: frontmatter.Post, **kwargs: Any) -> str:
        return f"{self.export(post.metadata)}\n{SEPARATOR}\n{post.content}"


HANDLER = JournalHandler()


# ── Public codec ──────────────────────────────────────────


def decode(raw_text: str) -> frontmatter.Post:
    """Parse an entry file's text.

    The returned post always has ``tags`` (tuple), ``id`` (str or None) and
    ``pubdate`` (aware datetime) in its metadata, plus any unrecognized keys.

    Raises:
        MissingSeparator: no line is exactly ``---``.
        MalformedHeaderLine: a header line has no ``:``.
        InvalidTimestamp: ``pubdate`` is missing or not in the expected format.
    """
    header, body = HANDLER.split(raw_text)
    post = frontmatter.Post(body, handler=HANDLER)
    post.metadata.update(HANDLER.load(header))
    return post


def encode(entry: Entry) -> str:
    """Serialize an entry in fixed field order: tags, id, pubdate, extras."""
    post = frontmatter.Post(entry.body, handler=HANDLER)
    # not Post(**metadata): an extra key named "content" or "handler" would collide
    post.metadata.update(entry.extra)
    post.metadata.update(tags=entry.tags, id=entry.id, pubdate=entry.pubdate)
    return frontmatter.dumps(post, handler=HANDLER)
