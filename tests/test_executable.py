"""Tests for executable path resolution and the privilege guard."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from daemonctl.service.errors import InvalidExecutionPathError, PrivilegeError
from daemonctl.service.executable import resolve_executable_path, validate_executable_path
from daemonctl.service.privileges import check_privileges, has_privileges


class TestResolveExecutablePath:
    """resolve_executable_path turns argv[0] into an absolute path."""

    def test_dotted_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_executable_path("./bin/../bin/app") == os.path.join(
            os.getcwd(), "bin", "app"
        )

    def test_relative_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_executable_path("bin/app") == os.path.join(os.getcwd(), "bin", "app")

    def test_absolute_path(self) -> None:
        assert resolve_executable_path("/usr/local/bin//app") == "/usr/local/bin/app"

    @patch("daemonctl.service.executable.shutil.which", return_value="/usr/local/bin/app")
    def test_bare_name_searches_path(self, mock_which) -> None:
        assert resolve_executable_path("app") == "/usr/local/bin/app"
        mock_which.assert_called_once_with("app")

    @patch("daemonctl.service.executable.shutil.which", return_value=None)
    def test_bare_name_not_found(self, mock_which) -> None:
        with pytest.raises(InvalidExecutionPathError):
            resolve_executable_path("app")

    def test_defaults_to_argv0(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["/opt/app/run"])
        assert resolve_executable_path() == "/opt/app/run"

    def test_empty(self) -> None:
        with pytest.raises(InvalidExecutionPathError):
            resolve_executable_path("")


class TestValidateExecutablePath:
    def test_file(self, executable: Path) -> None:
        validate_executable_path(str(executable))

    @pytest.mark.parametrize("kind", ["empty", "missing", "directory"])
    def test_invalid(self, kind: str, tmp_path: Path) -> None:
        path = {"empty": "", "missing": str(tmp_path / "nope"), "directory": str(tmp_path)}[kind]
        with pytest.raises(InvalidExecutionPathError):
            validate_executable_path(path)


class TestPrivileges:
    @patch("daemonctl.service.privileges.os.geteuid", return_value=0, create=True)
    def test_root(self, mock_geteuid) -> None:
        assert has_privileges() is True
        check_privileges()

    @patch("daemonctl.service.privileges.os.geteuid", return_value=1000, create=True)
    def test_user(self, mock_geteuid) -> None:
        assert has_privileges() is False
        with pytest.raises(PrivilegeError, match="root"):
            check_privileges()
