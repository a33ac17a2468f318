"""Create drafts and dated posts from templates."""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path

from draftsman.config import SiteConfig
from draftsman.errors import EmptyTitleError, InvalidTitleError
from draftsman.models import ContentKind, date_stamp, slugify
from draftsman.templates import RenderContext, render_template

logger = logging.getLogger(__name__)


def target_path(
    config: SiteConfig, kind: ContentKind, slug: str, today: date
) -> Path:
    """Canonical path for a new item: dated for posts, bare for drafts."""
    name = f"{slug}.{config.extension}"
    if kind == ContentKind.POST:
        name = f"{date_stamp(today)}-{name}"
    return config.content_path(kind) / name


def _check_slug(slug: str) -> None:
    """Reject slugs that are not a single visible file name."""
    separators = [sep for sep in (os.sep, os.altsep) if sep]
    if any(sep in slug for sep in separators):
        raise InvalidTitleError(f"Title cannot contain path separators: {slug!r}")
    # Dot-files are not listed as drafts.
    if slug.startswith("."):
        raise InvalidTitleError(f"Title cannot start with a dot: {slug!r}")


def create(
    config: SiteConfig,
    kind: ContentKind,
    title: str,
    *,
    today: date | None = None,
) -> Path:
    """Render the kind's template for ``title`` and write it to its canonical path.

    An existing file at the same path (same title, kind and day) is
    overwritten.

    Args:
        config: Site layout.
        kind: Whether to create a draft or a post.
        title: Human-readable title, passed to the template unchanged.
        today: Date for the post stamp. Defaults to the local date.

    Returns:
        Path of the written file.

    Raises:
        EmptyTitleError: If the title has no words.
        InvalidTitleError: If the slug would leave the kind's directory or
            name a hidden file.
        TemplateRenderError: If the template cannot be rendered.
        OSError: If the file cannot be written.
    """
    slug = slugify(title)
    if not slug:
        raise EmptyTitleError()
    _check_slug(slug)
    today = today or date.today()

    path = target_path(config, kind, slug, today)
    text = render_template(
        config, RenderContext(title=title, kind=kind, date=today, slug=slug)
    )

    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        logger.warning("Overwriting existing %s %s", kind.value, path)
    path.write_text(text, encoding="utf-8")
    logger.info("Created %s %s", kind.value, path)
    return path
