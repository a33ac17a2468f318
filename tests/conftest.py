"""Shared fixtures for draftsman tests."""

from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest
from draftsman.config import SiteConfig

TODAY = date(2024, 3, 5)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def site(tmp_path: Path) -> SiteConfig:
    """A site root with empty drafts and posts directories."""
    (tmp_path / "_drafts").mkdir()
    (tmp_path / "_posts").mkdir()
    return SiteConfig(root=tmp_path)


@pytest.fixture
def make_draft(site: SiteConfig) -> Callable[..., Path]:
    """Write a draft file into the site's drafts directory."""

    def _make(name: str, body: str = "draft body\n") -> Path:
        path = site.drafts_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _make


class _FrozenDate(date):
    @classmethod
    def today(cls) -> date:
        return TODAY


@pytest.fixture
def frozen_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """Pin the local date seen by the creator and promoter."""
    monkeypatch.setattr("draftsman.creator.date", _FrozenDate)
    monkeypatch.setattr("draftsman.promoter.date", _FrozenDate)
    return TODAY
