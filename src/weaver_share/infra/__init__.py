"""Infrastructure layer — external system integration.

Wraps all interaction with the operating system clipboard.  Every raw
third-party exception is caught here and re-raised as a
:class:`~weaver_share.exceptions.WeaverShareError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from weaver_share.infra.clipboard_detector import ClipboardStatus, detect_clipboard
from weaver_share.infra.pyperclip_clipboard import PyperclipClipboard

__all__: list[str] = [
    "ClipboardStatus",
    "PyperclipClipboard",
    "detect_clipboard",
]
