"""Settings for reference resolution, read from the environment and CLI options."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from mdx_include.core.roots import DEFAULT_MARKER

ENV_ROOT_DIR = "MDX_INCLUDE_ROOT_DIR"
ENV_WORKSPACE_ROOT = "MDX_INCLUDE_WORKSPACE_ROOT"
ENV_MARKER = "MDX_INCLUDE_MARKER"
ENV_DEBOUNCE_MS = "MDX_INCLUDE_DEBOUNCE_MS"

_DEFAULT_DEBOUNCE_SECONDS = 0.5


class InvalidSettingsError(ValueError):
    """Raised when a setting cannot be used."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root_dir: Path | None = None
    workspace_root: Path | None = None
    marker_filename: str = DEFAULT_MARKER
    debounce_seconds: float = _DEFAULT_DEBOUNCE_SECONDS
    document_suffixes: tuple[str, ...] = (".md", ".markdown")

    def resolved_root_dir(self) -> str | None:
        """Absolute root directory override, or ``None`` when unset.

        A relative override is taken relative to ``workspace_root`` (or the
        current directory when no workspace root is configured).
        """
        if self.root_dir is None:
            return None
        root = self.root_dir.expanduser()
        if not root.is_absolute():
            root = (self.workspace_root or Path.cwd()) / root
        return os.path.abspath(root)

    def is_document(self, path: str | Path) -> bool:
        return Path(path).suffix.lower() in self.document_suffixes


def _debounce_from_env() -> float | None:
    raw = os.getenv(ENV_DEBOUNCE_MS)
    if raw is None or not raw.strip():
        return None
    try:
        millis = int(raw)
    except ValueError:
        raise InvalidSettingsError(f"{ENV_DEBOUNCE_MS} must be an integer, got {raw!r}") from None
    if millis < 0:
        raise InvalidSettingsError(f"{ENV_DEBOUNCE_MS} must not be negative, got {millis}")
    return millis / 1000


def load_settings(**overrides: Any) -> Settings:
    """Build settings from ``MDX_INCLUDE_*`` variables; non-None overrides win."""
    values: dict[str, Any] = {}
    if root_dir := os.getenv(ENV_ROOT_DIR):
        values["root_dir"] = Path(root_dir)
    if workspace_root := os.getenv(ENV_WORKSPACE_ROOT):
        values["workspace_root"] = Path(workspace_root)
    if marker := os.getenv(ENV_MARKER):
        values["marker_filename"] = marker
    debounce = _debounce_from_env()
    if debounce is not None:
        values["debounce_seconds"] = debounce

    values.update({k: v for k, v in overrides.items() if v is not None})
    settings = Settings(**values)

    override = settings.resolved_root_dir()
    if override is not None and not os.path.isdir(override):
        raise InvalidSettingsError(f"Root directory override is not a directory: {override}")
    if "/" in settings.marker_filename or not settings.marker_filename:
        raise InvalidSettingsError(f"Invalid root marker filename: {settings.marker_filename!r}")
    return settings
