"""Content domain models: kinds, items and the slug convention.

A content item's kind is never stored in the file. It follows from the
directory the file lives in, and a post's publish date is the
``YYYY-MM-DD-`` prefix of its file name.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

DATE_FORMAT = "%Y-%m-%d"

_DATE_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})-(.+)$")


class ContentKind(StrEnum):
    """Where a content item lives in the site tree."""

    DRAFT = "draft"
    POST = "post"


def slugify(title: str) -> str:
    """Lower-case a title and join its whitespace-separated words with hyphens.

    Examples:
        >>> slugify("My  First Post")
        'my-first-post'
    """
    return "-".join(title.lower().split())


def unslugify(slug: str) -> str:
    """Best-effort title from a slug. Original casing and spacing are lost."""
    return " ".join(word.capitalize() for word in slug.split("-") if word)


def date_stamp(day: date) -> str:
    """Format a date as the file-name prefix used for posts."""
    return day.strftime(DATE_FORMAT)


class ContentItem(BaseModel):
    """A draft or post file on disk."""

    path: Path
    kind: ContentKind

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def base_name(self) -> str:
        """File name without extension and, for posts, without the date stamp."""
        stem = self.path.stem
        if self.kind == ContentKind.POST:
            match = _DATE_PREFIX.match(stem)
            if match:
                return match.group(2)
        return stem

    @property
    def title(self) -> str:
        return unslugify(self.base_name)

    @property
    def publish_date(self) -> date | None:
        """Date encoded in a post's file name, or None for drafts."""
        if self.kind != ContentKind.POST:
            return None
        match = _DATE_PREFIX.match(self.path.stem)
        if not match:
            return None
        try:
            return datetime.strptime(match.group(1), DATE_FORMAT).date()
        except ValueError:
            return None
