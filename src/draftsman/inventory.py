"""List the drafts and posts currently on disk.

The directory listing is the only record of what exists, so every call
rescans. Entries come back in the order the file system yields them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from draftsman.config import SiteConfig
from draftsman.models import ContentItem, ContentKind

logger = logging.getLogger(__name__)


def _scan(directory: Path, kind: ContentKind) -> list[ContentItem]:
    items: list[ContentItem] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name.startswith(".") or not entry.is_file():
                continue
            items.append(ContentItem(path=Path(entry.path), kind=kind))
    logger.debug("Found %d %s(s) in %s", len(items), kind.value, directory)
    return items


def list_drafts(config: SiteConfig) -> list[ContentItem]:
    """Return every draft file, unsorted.

    Raises:
        OSError: If the drafts directory is missing or unreadable.
    """
    return _scan(config.drafts_path, ContentKind.DRAFT)


def list_posts(config: SiteConfig) -> list[ContentItem]:
    """Return every post file, unsorted.

    Raises:
        OSError: If the posts directory is missing or unreadable.
    """
    return _scan(config.posts_path, ContentKind.POST)
