"""Protocols (interfaces) consumed outside the infrastructure layer.

The CLI depends on this contract rather than on the pyperclip-backed
implementation, so tests can substitute an in-memory clipboard.
"""

from __future__ import annotations

from typing import Protocol


class ClipboardProvider(Protocol):
    """Contract for clipboard backends.

    Any object that implements :meth:`copy` satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def copy(self, text: str) -> None:
        """Place *text* on the system clipboard.

        Raises
        ------
        ClipboardError
            When the backend cannot write to the clipboard.
        EnvironmentError
            When the backend library is not installed.
        """
        ...  # pragma: no cover
