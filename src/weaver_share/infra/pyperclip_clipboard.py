"""pyperclip backed implementation of :class:`~weaver_share.core.protocols.ClipboardProvider`.

This module is the **only** place in the codebase that touches the
system clipboard.  pyperclip exceptions are caught here and re-raised
as :class:`~weaver_share.exceptions.ClipboardError`.
"""

from __future__ import annotations

from weaver_share.exceptions import ClipboardError, EnvironmentError
from weaver_share.infra.clipboard_detector import platform_install_commands


class PyperclipClipboard:
    """Concrete :class:`ClipboardProvider` backed by pyperclip.

    Satisfies the protocol structurally, without inheritance.
    """

    @staticmethod
    def _install_hint() -> str:
        lines = ["Install a clipboard tool using one of:"]
        lines.extend(f"  {cmd}" for cmd in platform_install_commands())
        return "\n".join(lines)

    def copy(self, text: str) -> None:
        """Copy *text* to the clipboard.

        Raises
        ------
        EnvironmentError
            If pyperclip is not installed.
        ClipboardError
            If pyperclip cannot reach a clipboard backend.
        """
        try:
            import pyperclip
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "pyperclip is not installed. Install with: pip install pyperclip",
            ) from exc

        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(
                f"Could not copy output to clipboard: {exc}",
                hint=self._install_hint(),
            ) from exc
