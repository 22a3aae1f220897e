"""Tests for configuration loading."""

import pytest
from pathlib import Path

from jrni.config import JrniConfig, load_config, resolve_journal_dir
from jrni.errors import ConfigurationError

ENV_KEYS = ["JRNI_PATH", "JRNI_EDITOR", "EDITOR", "JRNI_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.journal_dir is None
        assert config.editor == "nvim"
        assert config.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("JRNI_PATH", "/srv/journal")
        monkeypatch.setenv("EDITOR", "vim")
        monkeypatch.setenv("JRNI_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.journal_dir == Path("/srv/journal")
        assert config.editor == "vim"
        assert config.log_level == "DEBUG"

    def test_jrni_editor_beats_editor(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "vim")
        monkeypatch.setenv("JRNI_EDITOR", "code -w")
        assert load_config().editor == "code -w"

    def test_flag_beats_env(self, monkeypatch):
        monkeypatch.setenv("JRNI_PATH", "/from/env")
        config = load_config("/from/flag")
        assert config.journal_dir == Path("/from/flag")

    def test_empty_env_ignored(self, monkeypatch):
        monkeypatch.setenv("JRNI_PATH", "")
        assert load_config().journal_dir is None

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "jrni.toml"
        toml_path.write_text("""
journal_dir = "/home/me/journal"
editor = "nano"
log_level = "INFO"
""")
        config = load_config(config_path=toml_path)
        assert config.journal_dir == Path("/home/me/journal")
        assert config.editor == "nano"
        assert config.log_level == "INFO"

    def test_toml_found_in_cwd(self, tmp_path: Path):
        (tmp_path / "jrni.toml").write_text('journal_dir = "/cwd/journal"\n')
        assert load_config().journal_dir == Path("/cwd/journal")

    def test_toml_found_in_home(self, tmp_path: Path):
        config_dir = tmp_path / "home" / ".config" / "jrni"
        config_dir.mkdir(parents=True)
        (config_dir / "jrni.toml").write_text('editor = "emacs"\n')
        assert load_config().editor == "emacs"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JRNI_PATH", "/from/env")

        toml_path = tmp_path / "jrni.toml"
        toml_path.write_text('journal_dir = "/from/toml"\n')
        config = load_config(config_path=toml_path)
        assert config.journal_dir == Path("/from/env")  # env wins

    def test_expands_user(self, tmp_path: Path):
        config = load_config("~/journal")
        assert config.journal_dir == tmp_path / "home" / "journal"


class TestResolveJournalDir:
    def test_missing(self):
        with pytest.raises(ConfigurationError, match="JRNI_PATH"):
            resolve_journal_dir(JrniConfig())

    def test_absolute(self, tmp_path: Path):
        resolved = resolve_journal_dir(JrniConfig(journal_dir=Path("rel/journal")))
        assert resolved.is_absolute()
        assert resolved == (tmp_path / "rel" / "journal").resolve()
