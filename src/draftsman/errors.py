"""Exceptions raised by the draft/post workflow.

File-system failures are not wrapped: unreadable directories, unwritable
targets and failed renames propagate as the builtin ``OSError`` subclasses.
"""

from __future__ import annotations


class DraftsmanError(Exception):
    """Base class for all draftsman errors."""


class NoDraftsError(DraftsmanError):
    """Raised when publishing is attempted with an empty draft inventory."""

    def __init__(self, message: str = "No drafts") -> None:
        super().__init__(message)


class InvalidSelectionError(DraftsmanError, ValueError):
    """Raised when a draft choice is non-numeric or outside ``[0, count-1]``."""

    def __init__(self, choice: str, count: int) -> None:
        self.choice = choice
        self.count = count
        super().__init__(
            f"Invalid selection {choice!r}: choose a number from 0 to {count - 1}"
        )


class InvalidTitleError(DraftsmanError, ValueError):
    """Raised when a title cannot be turned into a file name in its directory."""


class EmptyTitleError(InvalidTitleError):
    """Raised when a title slugifies to nothing."""

    def __init__(self) -> None:
        super().__init__("Title cannot be empty")


class TemplateRenderError(DraftsmanError):
    """Raised when a content template cannot be loaded or rendered."""


class PostExistsError(DraftsmanError, FileExistsError):
    """Raised when promotion would replace an existing post."""

    def __init__(self, destination: object) -> None:
        self.destination = destination
        super().__init__(f"Post already exists: {destination}")
