"""Configuration loading from flags, environment variables and jrni.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from jrni.errors import ConfigurationError

_CONFIG_FILENAME = "jrni.toml"
_DEFAULT_EDITOR = "nvim"


@dataclass
class JrniConfig:
    """Top-level jrni configuration."""

    journal_dir: Path | None = None
    editor: str = _DEFAULT_EDITOR
    log_level: str = "WARNING"


def _read_config_file(config_path: Path | None) -> dict:
    if config_path and config_path.exists():
        return tomllib.loads(config_path.read_text())
    # Search current dir and ~/.config/jrni/
    for candidate in [
        Path.cwd() / _CONFIG_FILENAME,
        Path.home() / ".config" / "jrni" / _CONFIG_FILENAME,
    ]:
        if candidate.exists():
            return tomllib.loads(candidate.read_text())
    return {}


def load_config(
    journal_dir: str | Path | None = None,
    config_path: Path | None = None,
) -> JrniConfig:
    """Load configuration.

    Priority: explicit ``journal_dir`` argument > environment variables >
    jrni.toml > defaults. The journal directory has no default; see
    ``resolve_journal_dir``.
    """
    file_data = _read_config_file(config_path)

    path = journal_dir or os.getenv("JRNI_PATH") or file_data.get("journal_dir")
    editor = (
        os.getenv("JRNI_EDITOR")
        or os.getenv("EDITOR")
        or file_data.get("editor", _DEFAULT_EDITOR)
    )
    return JrniConfig(
        journal_dir=Path(path).expanduser() if path else None,
        editor=editor,
        log_level=os.getenv("JRNI_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )


def resolve_journal_dir(config: JrniConfig) -> Path:
    """Absolute journal directory, or ConfigurationError if none was given."""
    if config.journal_dir is None:
        raise ConfigurationError(
            "no journal directory configured: pass --path, set JRNI_PATH, "
            f"or add journal_dir to {_CONFIG_FILENAME}"
        )
    return config.journal_dir.expanduser().resolve()
