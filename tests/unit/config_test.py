"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdx_include.config import (
    ENV_DEBOUNCE_MS,
    ENV_MARKER,
    ENV_ROOT_DIR,
    ENV_WORKSPACE_ROOT,
    InvalidSettingsError,
    Settings,
    load_settings,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (ENV_ROOT_DIR, ENV_WORKSPACE_ROOT, ENV_MARKER, ENV_DEBOUNCE_MS):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.root_dir is None
        assert settings.marker_filename == "mkdocs.yml"
        assert settings.debounce_seconds == 0.5
        assert settings.resolved_root_dir() is None

    def test_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv(ENV_ROOT_DIR, str(tmp_path))
        monkeypatch.setenv(ENV_MARKER, "docs.toml")
        monkeypatch.setenv(ENV_DEBOUNCE_MS, "250")

        settings = load_settings()
        assert settings.resolved_root_dir() == str(tmp_path)
        assert settings.marker_filename == "docs.toml"
        assert settings.debounce_seconds == 0.25

    def test_overrides_win_over_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_MARKER, "docs.toml")
        assert load_settings(marker_filename="book.toml").marker_filename == "book.toml"
        assert load_settings(marker_filename=None).marker_filename == "docs.toml"

    def test_relative_root_uses_workspace_root(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        settings = load_settings(root_dir=Path("src"), workspace_root=tmp_path)
        assert settings.resolved_root_dir() == str(tmp_path / "src")

    def test_root_must_be_a_directory(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidSettingsError, match="not a directory"):
            load_settings(root_dir=tmp_path / "nope")

    @pytest.mark.parametrize("marker", ["", "a/mkdocs.yml"])
    def test_invalid_marker(self, marker: str) -> None:
        with pytest.raises(InvalidSettingsError, match="marker"):
            load_settings(marker_filename=marker)

    @pytest.mark.parametrize("raw", ["soon", "-1"])
    def test_invalid_debounce(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv(ENV_DEBOUNCE_MS, raw)
        with pytest.raises(InvalidSettingsError, match=ENV_DEBOUNCE_MS):
            load_settings()


class TestSettings:
    def test_is_document(self) -> None:
        settings = Settings()
        assert settings.is_document("docs/index.md")
        assert settings.is_document("docs/INDEX.MARKDOWN")
        assert not settings.is_document("src/app.py")
