"""Tests for configuration loading and the fluent builder."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from daemonctl.core.config import Config, ConfigData, load_config


class TestConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        data = load_config(tmp_path / "config.json")
        assert data == ConfigData()
        assert data.service_dirs.rcd == Path("/usr/local/etc/rc.d")
        assert data.rc.files == [Path("/etc/rc.conf"), Path("/etc/rc.conf.local")]

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "service_dirs": {"rcd": str(tmp_path / "rc.d")},
            "launchd": {"log_dir": "/var/log"},
        }))

        data = load_config(path)

        assert data.service_dirs.rcd == (tmp_path / "rc.d").resolve()
        assert data.service_dirs.launchd == Path("/Library/LaunchDaemons")
        assert data.launchd.log_dir == "/var/log"
        assert data.launchd.working_dir == "/usr/local/var"

    def test_malformed_file_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert load_config(path) == ConfigData()

    def test_save_and_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "config.json"
        (
            Config(path)
            .service_dir("systemd", str(tmp_path / "units"))
            .rc_conf(str(tmp_path / "rc.conf"))
            .launchd_dirs("/srv", "/srv/log")
            .log_level("debug")
            .save()
        )

        data = load_config(path)

        assert data.service_dirs.systemd == (tmp_path / "units").resolve()
        assert data.rc.files == [(tmp_path / "rc.conf").resolve()]
        assert data.launchd.working_dir == "/srv"
        assert data.logging.level == "DEBUG"

    def test_unknown_manager(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            Config(tmp_path / "c.json").service_dir("upstart", "/etc/init")

    def test_builder_is_single_use(self, tmp_path: Path) -> None:
        config = Config(tmp_path / "c.json")
        config.build()
        with pytest.raises(RuntimeError):
            config.log_level("INFO")
