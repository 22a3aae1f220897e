"""Tests for editor invocation (mocked subprocess)."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from jrni.editor import build_command, open_in_editor
from jrni.errors import EditorError


def completed(returncode: int) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


class TestBuildCommand:
    def test_plain(self):
        assert build_command("nvim", Path("/j/a.md")) == ["nvim", "/j/a.md"]

    def test_with_arguments(self):
        assert build_command("code -w", Path("/j/a.md")) == ["code", "-w", "/j/a.md"]

    def test_quoted(self):
        cmd = build_command('"/opt/My Editor/bin/ed" --wait', Path("/j/a.md"))
        assert cmd == ["/opt/My Editor/bin/ed", "--wait", "/j/a.md"]


class TestOpenInEditor:
    def test_blocks_on_subprocess_run(self):
        with patch("jrni.editor.subprocess.run", return_value=completed(0)) as run:
            rc = open_in_editor(Path("/j/a.md"), "vim")
        assert rc == 0
        run.assert_called_once_with(["vim", "/j/a.md"])

    def test_nonzero_exit_is_not_fatal(self, caplog):
        with patch("jrni.editor.subprocess.run", return_value=completed(3)):
            rc = open_in_editor(Path("/j/a.md"), "vim")
        assert rc == 3
        assert "status 3" in caplog.text

    def test_missing_editor(self):
        run = MagicMock(side_effect=FileNotFoundError())
        with patch("jrni.editor.subprocess.run", run):
            with pytest.raises(EditorError, match="not-an-editor"):
                open_in_editor(Path("/j/a.md"), "not-an-editor")

    def test_empty_editor(self):
        with pytest.raises(EditorError):
            open_in_editor(Path("/j/a.md"), "   ")
