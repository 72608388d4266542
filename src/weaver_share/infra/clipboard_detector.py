"""Infrastructure: clipboard backend detection and platform guidance.

pyperclip delegates to a platform tool on macOS and Linux.  This module
finds out whether such a tool is on PATH and, when it is not, suggests
how to install one.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass

_LINUX_TOOLS: tuple[str, ...] = ("wl-copy", "xclip", "xsel")


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClipboardStatus:
    """Result of a clipboard backend probe.

    Attributes
    ----------
    found : bool
        Whether a usable clipboard backend exists.
    tool : str | None
        Name of the backend (``"pbcopy"``, ``"xclip"``, ``"windows"``…),
        or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing a backend.  Empty when
        one is already present.
    """

    found: bool
    tool: str | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_clipboard() -> ClipboardStatus:
    """Probe the system for a clipboard backend usable by pyperclip.

    Returns a :class:`ClipboardStatus` whether or not a backend is
    present — the caller decides whether to abort or merely warn.
    """
    system = platform.system().lower()

    if system == "windows":
        # pyperclip talks to the Win32 API directly.
        return ClipboardStatus(found=True, tool="windows", install_commands=())

    candidates = ("pbcopy",) if system == "darwin" else _LINUX_TOOLS
    for tool in candidates:
        if shutil.which(tool) is not None:
            return ClipboardStatus(found=True, tool=tool, install_commands=())

    return ClipboardStatus(
        found=False,
        tool=None,
        install_commands=platform_install_commands(),
    )


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def platform_install_commands() -> tuple[str, ...]:
    """Return clipboard-tool install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "linux":
        return (
            "sudo apt install xclip",
            "sudo dnf install xclip",
            "sudo pacman -S wl-clipboard",
        )
    if system == "darwin":
        return ("pbcopy ships with macOS; check your PATH",)
    return ("Install xclip, xsel or wl-clipboard for your platform",)
