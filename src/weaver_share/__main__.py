"""Allow ``python -m weaver_share`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m weaver_share`` behaves identically to the ``weaver-share``
console script.
"""

from __future__ import annotations

from weaver_share.cli.app import cli

if __name__ == "__main__":
    cli()
