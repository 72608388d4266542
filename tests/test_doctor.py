"""Tests for the ``weaver-share doctor`` command (cli/doctor.py).

Clipboard detection is mocked — no dependency on the host's tools.

Coverage:
* Individual check functions return correct tuples.
* Doctor returns SUCCESS when everything required is present.
* Doctor returns GENERAL_ERROR when a required library is missing.
* Missing clipboard backend is only a warning.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from weaver_share.cli import exit_codes
from weaver_share.infra.clipboard_detector import ClipboardStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _clipboard_found() -> ClipboardStatus:
    return ClipboardStatus(found=True, tool="xclip", install_commands=())


def _clipboard_missing() -> ClipboardStatus:
    return ClipboardStatus(
        found=False,
        tool=None,
        install_commands=("sudo apt install xclip",),
    )


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from weaver_share.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestLibraryCheck:
    def test_installed(self) -> None:
        from weaver_share.cli.doctor import _library_check

        label, _value, status = _library_check("pyperclip")
        assert label == "pyperclip"
        assert "OK" in status

    @patch.dict("sys.modules", {"questionary": None})
    def test_required_missing_fails(self) -> None:
        from weaver_share.cli.doctor import _library_check

        _label, value, status = _library_check("questionary")
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    @patch.dict("sys.modules", {"rich": None})
    def test_optional_missing_warns(self) -> None:
        from weaver_share.cli.doctor import _library_check

        _label, _value, status = _library_check("rich", required=False)
        assert "WARN" in status


class TestClipboardCheck:
    def test_found(self) -> None:
        from weaver_share.cli.doctor import _clipboard_check

        assert _clipboard_check(_clipboard_found()) == (
            "clipboard", "xclip", "[green]OK[/green]",
        )

    def test_missing_is_warning(self) -> None:
        from weaver_share.cli.doctor import _clipboard_check

        _label, _value, status = _clipboard_check(_clipboard_missing())
        assert "WARN" in status


class TestOsCheck:
    @patch("weaver_share.cli.doctor.platform.system", return_value="Darwin")
    def test_macos_display_name(self, _sys: object) -> None:
        from weaver_share.cli.doctor import _os_check

        label, value, _status = _os_check()
        assert label == "OS"
        assert value.startswith("macOS")


class TestStatusPlain:
    @pytest.mark.parametrize(
        "status,expected",
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("other", "other"),
        ],
    )
    def test_strips_markup(self, status: str, expected: str) -> None:
        from weaver_share.cli.doctor import _status_plain

        assert _status_plain(status) == expected


# ---------------------------------------------------------------------------
# run_doctor
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("weaver_share.cli.doctor.detect_clipboard")
    def test_all_ok(self, mock_detect: object, capsys: pytest.CaptureFixture[str]) -> None:
        from weaver_share.cli.doctor import run_doctor

        mock_detect.return_value = _clipboard_found()  # type: ignore[attr-defined]
        assert run_doctor() == exit_codes.SUCCESS
        assert "All checks passed." in capsys.readouterr().err

    @patch("weaver_share.cli.doctor.detect_clipboard")
    def test_missing_clipboard_still_succeeds(
        self, mock_detect: object, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from weaver_share.cli.doctor import run_doctor

        mock_detect.return_value = _clipboard_missing()  # type: ignore[attr-defined]
        assert run_doctor() == exit_codes.SUCCESS
        assert "sudo apt install xclip" in capsys.readouterr().err
        mock_detect.assert_called_once_with()  # type: ignore[attr-defined]

    @patch.dict("sys.modules", {"pyperclip": None})
    @patch("weaver_share.cli.doctor.detect_clipboard")
    def test_missing_required_library_fails(
        self, mock_detect: object, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from weaver_share.cli.doctor import run_doctor

        mock_detect.return_value = _clipboard_found()  # type: ignore[attr-defined]
        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in capsys.readouterr().err


class TestDoctorRouting:
    @patch("weaver_share.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_main_returns_doctor_code(self, mock_run: object) -> None:
        from weaver_share.cli.app import main

        assert main(["doctor"]) == exit_codes.GENERAL_ERROR
