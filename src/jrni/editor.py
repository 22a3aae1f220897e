"""External editor invocation. Blocks until the editor exits."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from jrni.errors import EditorError

logger = logging.getLogger(__name__)


def build_command(editor: str, path: Path) -> list[str]:
    """Split the editor setting shell-style so ``"code -w"`` works."""
    return [*shlex.split(editor), str(path)]


def open_in_editor(path: Path, editor: str) -> int:
    """Open ``path`` in ``editor`` and wait for it to exit.

    The file is already on disk before the editor starts, so a non-zero
    exit status is logged and returned rather than raised.
    """
    cmd = build_command(editor, path)
    if len(cmd) < 2:
        raise EditorError("editor command is empty; set EDITOR or JRNI_EDITOR")

    logger.debug("Running: %s", " ".join(cmd))

    try:
        result = subprocess.run(cmd)
    except FileNotFoundError:
        raise EditorError(
            f"editor {cmd[0]!r} not found; set EDITOR or JRNI_EDITOR"
        ) from None

    if result.returncode != 0:
        logger.warning("Editor exited with status %d for %s", result.returncode, path)
    return result.returncode
