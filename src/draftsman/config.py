"""Site configuration loaded from .draftsman.toml and CLI flags.

Loading order: defaults → TOML file → CLI flags.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ValidationError

from draftsman.models import ContentKind

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".draftsman.toml"


class SiteConfig(BaseModel):
    """Layout of a static site's content tree.

    Directory settings are relative to ``root`` unless given as absolute
    paths.
    """

    root: Path = Path(".")
    drafts_dir: str = "_drafts"
    posts_dir: str = "_posts"
    templates_dir: str = "_templates"
    extension: str = "markdown"
    overwrite: bool = False

    @property
    def drafts_path(self) -> Path:
        return self.root / self.drafts_dir

    @property
    def posts_path(self) -> Path:
        return self.root / self.posts_dir

    @property
    def templates_path(self) -> Path:
        return self.root / self.templates_dir

    def content_path(self, kind: ContentKind) -> Path:
        """Directory holding items of the given kind."""
        if kind == ContentKind.POST:
            return self.posts_path
        return self.drafts_path

    def template_name(self, kind: ContentKind) -> str:
        """File name of the template used for new items of this kind."""
        return f"{kind.value}.{self.extension}"


def load_config(root: str | Path = ".", path: str | Path | None = None) -> SiteConfig:
    """Load site configuration.

    Search order:
    1. Explicit path (if provided)
    2. .draftsman.toml in the site root

    Args:
        root: Site root directory. Always wins over a ``root`` key in the file.
        path: Explicit path to a TOML file.

    Returns:
        Merged SiteConfig.
    """
    root = Path(root)
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        candidate = root / CONFIG_FILENAME
        if candidate.exists():
            data = _load_toml(candidate)
            logger.info("Loaded config from %s", candidate)

    data["root"] = root
    try:
        return SiteConfig.model_validate(data)
    except ValidationError as exc:
        logger.warning("Invalid config values, using defaults: %s", exc)
        return SiteConfig(root=root)


def merge_cli_overrides(config: SiteConfig, **cli_kwargs: object) -> SiteConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only values that are not None are applied; unknown keys are ignored.
    """
    data = config.model_dump()
    for key, value in cli_kwargs.items():
        if value is None or key not in data:
            continue
        data[key] = value
    return SiteConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}
