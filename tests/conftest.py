"""Shared pytest fixtures and configuration for the weaver-share test suite.

Guidelines
----------
* No real terminal interaction — questionary is always mocked.
* No real clipboard access — pyperclip is mocked at the infra boundary.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def share_day() -> date:
    """Fixed header date so rendered tables are deterministic."""
    return date(2026, 10, 16)
