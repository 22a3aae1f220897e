"""Filename policy: ``YYYY-MM-DD-<slug>.md``.

The date prefix makes alphabetical order creation order, which the store
relies on for first-match id lookups.
"""

from __future__ import annotations

import re
from datetime import date
from typing import NamedTuple

from jrni.errors import InvalidTitle

_FILENAME_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})-(.+)\.md$")
# \W is Unicode aware; "_" is a word character but not alphanumeric
_NON_ALNUM_RE = re.compile(r"[\W_]+")


class JournalFilename(NamedTuple):
    day: date
    slug: str


def slugify(title: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to ``-``, trim hyphens."""
    slug = _NON_ALNUM_RE.sub("-", title.lower()).strip("-")
    if not slug:
        raise InvalidTitle(title)
    return slug


def generate(day: date, title: str) -> str:
    return f"{day.isoformat()}-{slugify(title)}.md"


def parse(filename: str) -> JournalFilename | None:
    """Split a journal filename into (day, slug); None for anything else."""
    match = _FILENAME_RE.match(filename)
    if match is None:
        return None
    try:
        day = date.fromisoformat(match.group(1))
    except ValueError:
        return None
    return JournalFilename(day, match.group(2))
