"""Tests for SiteConfig, TOML loading and CLI overrides."""

from pathlib import Path

from draftsman.config import CONFIG_FILENAME, SiteConfig, load_config, merge_cli_overrides
from draftsman.models import ContentKind


class TestSiteConfigDefaults:
    def test_default_layout(self):
        cfg = SiteConfig()
        assert cfg.drafts_dir == "_drafts"
        assert cfg.posts_dir == "_posts"
        assert cfg.templates_dir == "_templates"
        assert cfg.extension == "markdown"
        assert cfg.overwrite is False

    def test_paths_are_relative_to_root(self, tmp_path: Path):
        cfg = SiteConfig(root=tmp_path)
        assert cfg.drafts_path == tmp_path / "_drafts"
        assert cfg.posts_path == tmp_path / "_posts"
        assert cfg.templates_path == tmp_path / "_templates"

    def test_content_path_by_kind(self, tmp_path: Path):
        cfg = SiteConfig(root=tmp_path)
        assert cfg.content_path(ContentKind.DRAFT) == cfg.drafts_path
        assert cfg.content_path(ContentKind.POST) == cfg.posts_path

    def test_template_name_uses_extension(self):
        cfg = SiteConfig(extension="md")
        assert cfg.template_name(ContentKind.POST) == "post.md"


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.root == tmp_path
        assert cfg.drafts_dir == "_drafts"

    def test_reads_file_in_root(self, tmp_path: Path):
        (tmp_path / CONFIG_FILENAME).write_text(
            'drafts_dir = "drafts"\nextension = "md"\noverwrite = true\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.drafts_dir == "drafts"
        assert cfg.extension == "md"
        assert cfg.overwrite is True

    def test_explicit_path(self, tmp_path: Path):
        toml_path = tmp_path / "custom.toml"
        toml_path.write_text('posts_dir = "published"\n')
        cfg = load_config(tmp_path, toml_path)
        assert cfg.posts_dir == "published"

    def test_missing_explicit_path_returns_defaults(self, tmp_path: Path):
        cfg = load_config(tmp_path, tmp_path / "nonexistent.toml")
        assert cfg.posts_dir == "_posts"

    def test_malformed_file_returns_defaults(self, tmp_path: Path):
        (tmp_path / CONFIG_FILENAME).write_text("this is [not toml")
        cfg = load_config(tmp_path)
        assert cfg.drafts_dir == "_drafts"

    def test_invalid_value_returns_defaults(self, tmp_path: Path):
        (tmp_path / CONFIG_FILENAME).write_text('overwrite = "maybe"\ndrafts_dir = "drafts"\n')
        cfg = load_config(tmp_path)
        assert cfg.root == tmp_path
        assert cfg.overwrite is False
        assert cfg.drafts_dir == "_drafts"

    def test_root_argument_wins(self, tmp_path: Path):
        (tmp_path / CONFIG_FILENAME).write_text('root = "/elsewhere"\n')
        cfg = load_config(tmp_path)
        assert cfg.root == tmp_path


class TestMergeCliOverrides:
    def test_none_values_are_ignored(self, tmp_path: Path):
        cfg = SiteConfig(root=tmp_path, overwrite=True)
        merged = merge_cli_overrides(cfg, overwrite=None)
        assert merged.overwrite is True

    def test_explicit_values_apply(self, tmp_path: Path):
        cfg = SiteConfig(root=tmp_path)
        merged = merge_cli_overrides(cfg, overwrite=True, unknown="ignored")
        assert merged.overwrite is True
        assert merged.root == tmp_path
