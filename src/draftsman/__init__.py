"""Draft and post lifecycle for static-site blogs.

Creates dated posts and undated drafts from templates, and promotes a
draft to a post by moving it into the posts directory under today's date.
"""

from draftsman.config import SiteConfig, load_config
from draftsman.creator import create
from draftsman.errors import (
    DraftsmanError,
    EmptyTitleError,
    InvalidSelectionError,
    InvalidTitleError,
    NoDraftsError,
    PostExistsError,
    TemplateRenderError,
)
from draftsman.inventory import list_drafts, list_posts
from draftsman.models import ContentItem, ContentKind, slugify, unslugify
from draftsman.promoter import Promoter, parse_selection, promote

__version__ = "0.1.0"

__all__ = [
    "ContentItem",
    "ContentKind",
    "DraftsmanError",
    "EmptyTitleError",
    "InvalidSelectionError",
    "InvalidTitleError",
    "NoDraftsError",
    "PostExistsError",
    "Promoter",
    "SiteConfig",
    "TemplateRenderError",
    "create",
    "list_drafts",
    "list_posts",
    "load_config",
    "parse_selection",
    "promote",
    "slugify",
    "unslugify",
]
