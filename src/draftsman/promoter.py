"""Promote a draft to a post.

Publishing is a single run through list → present → prompt → move → report.
The only mutation is one rename of the chosen draft into the posts
directory under today's date stamp, so a failure at any step leaves the
tree as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

from draftsman.config import SiteConfig
from draftsman.errors import InvalidSelectionError, NoDraftsError, PostExistsError
from draftsman.inventory import list_drafts
from draftsman.models import ContentItem, date_stamp

logger = logging.getLogger(__name__)

ChooseFn = Callable[[int], str]
PresentFn = Callable[[list[ContentItem]], None]


def parse_selection(choice: str, count: int) -> int:
    """Turn a raw answer into a draft index in ``[0, count-1]``.

    Raises:
        InvalidSelectionError: If the answer is not an integer in range.
    """
    try:
        index = int(choice.strip())
    except ValueError:
        raise InvalidSelectionError(choice, count) from None
    if not 0 <= index < count:
        raise InvalidSelectionError(choice, count)
    return index


def destination_for(config: SiteConfig, draft: ContentItem, today: date) -> Path:
    return config.posts_path / f"{date_stamp(today)}-{draft.file_name}"


def promote(
    config: SiteConfig,
    draft: ContentItem,
    *,
    today: date | None = None,
    overwrite: bool | None = None,
) -> Path:
    """Move ``draft`` into the posts directory with today's date stamp.

    Args:
        config: Site layout.
        draft: The draft to promote.
        today: Date for the stamp. Defaults to the local date.
        overwrite: Replace an existing post of the same name. Defaults to
            ``config.overwrite``.

    Returns:
        The new post path.

    Raises:
        PostExistsError: If the destination exists and overwriting is off.
        OSError: If the rename fails; the draft is left in place.
    """
    today = today or date.today()
    if overwrite is None:
        overwrite = config.overwrite

    destination = destination_for(config, draft, today)
    if destination.exists():
        if not overwrite:
            raise PostExistsError(destination)
        logger.warning("Replacing existing post %s", destination)

    destination.parent.mkdir(parents=True, exist_ok=True)
    draft.path.replace(destination)
    logger.info("Promoted %s -> %s", draft.path, destination)
    return destination


class Promoter:
    """Interactive draft-to-post promotion.

    ``choose`` is called with the number of drafts and returns the user's
    raw answer; ``present`` receives the drafts to display before the first
    prompt. Invalid answers are re-prompted until ``max_attempts`` is
    exhausted (never, when it is None).
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        choose: ChooseFn,
        present: PresentFn | None = None,
        on_invalid: Callable[[InvalidSelectionError], None] | None = None,
        today: date | None = None,
        max_attempts: int | None = None,
    ) -> None:
        self.config = config
        self._choose = choose
        self._present = present
        self._on_invalid = on_invalid
        self._today = today
        self._max_attempts = max_attempts

    def publish(self, *, overwrite: bool | None = None) -> Path:
        """Run the promotion and return the new post path.

        Raises:
            NoDraftsError: If there is nothing to publish. Nothing is touched.
            InvalidSelectionError: If ``max_attempts`` answers were all invalid.
            PostExistsError: See :func:`promote`.
            OSError: If the drafts directory cannot be read or the move fails.
        """
        drafts = list_drafts(self.config)
        if not drafts:
            raise NoDraftsError()

        if self._present is not None:
            self._present(drafts)

        index = self._select(len(drafts))
        return promote(
            self.config, drafts[index], today=self._today, overwrite=overwrite
        )

    def _select(self, count: int) -> int:
        attempts = 0
        while True:
            attempts += 1
            try:
                return parse_selection(self._choose(count), count)
            except InvalidSelectionError as exc:
                if self._max_attempts is not None and attempts >= self._max_attempts:
                    raise
                logger.debug("Rejected selection %r", exc.choice)
                if self._on_invalid is not None:
                    self._on_invalid(exc)
