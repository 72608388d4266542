"""weaver-share — shareable result grids for the word game Weaver.

Validates a word ladder typed at the terminal and renders it as an
emoji table ready to paste into chat.
"""

from weaver_share.version import __version__

__all__: list[str] = ["__version__"]
