"""System clipboard access through the platform's copy command."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from typing import Optional

from ..core.errors import ClipboardError

logger = logging.getLogger(__name__)

COPY_TIMEOUT = 5

# Linux candidates in order of preference
_LINUX_COMMANDS: list[list[str]] = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def clipboard_command(platform: Optional[str] = None) -> Optional[list[str]]:
    """Copy command for ``platform`` (defaults to ``sys.platform``), or None."""
    platform = platform or sys.platform

    if platform == "darwin":
        return ["pbcopy"]
    if platform.startswith("win"):
        return ["clip"]

    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
        return ["wl-copy"]
    for command in _LINUX_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str, platform: Optional[str] = None) -> None:
    """
    Copy ``text`` to the system clipboard.

    Raises:
        ClipboardError: no copy command is available or it failed
    """
    command = clipboard_command(platform)
    if command is None:
        raise ClipboardError("No clipboard command found (install xclip, xsel or wl-clipboard)")

    logger.debug("Copying %d characters with %s", len(text), command[0])
    try:
        result = subprocess.run(
            command,
            input=text.encode("utf-8"),
            capture_output=True,
            timeout=COPY_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ClipboardError(f"Failed to copy to clipboard: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise ClipboardError(f"Failed to copy to clipboard: {command[0]} exited {result.returncode}: {stderr}")
