"""Jinja2 rendering of draft and post templates.

Site templates in the configured templates directory take precedence over
the defaults bundled with the package.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from draftsman.config import SiteConfig
from draftsman.errors import TemplateRenderError
from draftsman.models import ContentKind

logger = logging.getLogger(__name__)


def default_templates_dir() -> Path:
    """Directory of the templates shipped with the package."""
    return Path(str(files("draftsman").joinpath("default_templates")))


@dataclass(frozen=True)
class RenderContext:
    """Variables exposed to a content template.

    ``title`` is the title exactly as the user typed it, not the slug.
    """

    title: str
    kind: ContentKind
    date: date
    slug: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "kind": self.kind.value,
            "date": self.date,
            "slug": self.slug,
        }


def build_environment(config: SiteConfig) -> Environment:
    """Create a Jinja2 environment searching site templates, then defaults."""
    return Environment(
        loader=ChoiceLoader(
            [
                FileSystemLoader(config.templates_path),
                FileSystemLoader(default_templates_dir()),
            ]
        ),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_template(config: SiteConfig, context: RenderContext) -> str:
    """Render the template for ``context.kind``.

    Raises:
        TemplateRenderError: If the template is missing or fails to render.
    """
    name = config.template_name(context.kind)
    env = build_environment(config)
    try:
        # Bundled defaults are always named <kind>.markdown.
        template = env.select_template([name, f"{context.kind.value}.markdown"])
        logger.debug("Rendering %s for %r", template.filename, context.title)
        return template.render(**context.as_dict())
    except TemplateNotFound as exc:
        raise TemplateRenderError(f"Template not found: {name}") from exc
    except TemplateError as exc:
        raise TemplateRenderError(f"Failed to render {name}: {exc}") from exc
