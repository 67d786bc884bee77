"""Configuration management with fluent builder interface."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from daemonctl.utils.paths import expand_path, get_config_file


@dataclass
class ServiceDirs:
    """Directories the service managers read descriptors from."""

    rcd: Path = Path("/usr/local/etc/rc.d")
    launchd: Path = Path("/Library/LaunchDaemons")
    systemd: Path = Path("/etc/systemd/system")


@dataclass
class RcConfig:
    """Boot-time configuration consulted on rc.d hosts."""

    files: list[Path] = field(
        default_factory=lambda: [Path("/etc/rc.conf"), Path("/etc/rc.conf.local")]
    )


@dataclass
class LaunchdSettings:
    """Fixed locations written into launchd property lists."""

    working_dir: str = "/usr/local/var"
    log_dir: str = "/usr/local/var/log"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    file: Optional[Path] = None
    level: str = "INFO"


@dataclass
class ConfigData:
    """Complete configuration data structure."""

    service_dirs: ServiceDirs = field(default_factory=ServiceDirs)
    rc: RcConfig = field(default_factory=RcConfig)
    launchd: LaunchdSettings = field(default_factory=LaunchdSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class Config:
    """
    Fluent configuration builder for daemonctl.

    Example:
        config = (
            Config()
            .service_dir("rcd", "/usr/local/etc/rc.d")
            .rc_conf("/etc/rc.conf", "/etc/rc.conf.local")
            .log_level("DEBUG")
            .save()
        )
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._built = False
        self._config_path = config_path or get_config_file()
        self._data = ConfigData()
        self._load_existing()

    def _load_existing(self) -> None:
        """Load existing config if present."""
        if self._config_path.exists():
            try:
                with open(self._config_path) as f:
                    data = json.load(f)
                self._from_dict(data)
            except (json.JSONDecodeError, KeyError, TypeError):
                pass

    def _from_dict(self, data: dict[str, Any]) -> None:
        """Populate config from dictionary (for loading from JSON)."""
        if "service_dirs" in data:
            dirs = data["service_dirs"]
            for key in ("rcd", "launchd", "systemd"):
                if key in dirs:
                    setattr(self._data.service_dirs, key, expand_path(dirs[key]))

        if "rc" in data:
            files = data["rc"].get("files")
            if files is not None:
                self._data.rc.files = [expand_path(p) for p in files]

        if "launchd" in data:
            ld = data["launchd"]
            self._data.launchd.working_dir = ld.get(
                "working_dir", self._data.launchd.working_dir
            )
            self._data.launchd.log_dir = ld.get("log_dir", self._data.launchd.log_dir)

        if "logging" in data:
            log = data["logging"]
            log_file = log.get("file")
            self._data.logging.file = expand_path(log_file) if log_file else None
            self._data.logging.level = log.get("level", "INFO")

    def _to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "service_dirs": {
                "rcd": str(self._data.service_dirs.rcd),
                "launchd": str(self._data.service_dirs.launchd),
                "systemd": str(self._data.service_dirs.systemd),
            },
            "rc": {
                "files": [str(p) for p in self._data.rc.files],
            },
            "launchd": {
                "working_dir": self._data.launchd.working_dir,
                "log_dir": self._data.launchd.log_dir,
            },
            "logging": {
                "file": str(self._data.logging.file) if self._data.logging.file else None,
                "level": self._data.logging.level,
            },
        }

    # Fluent builder methods

    def _check_not_built(self) -> None:
        if self._built:
            raise RuntimeError("Config has already been built")

    def service_dir(self, manager: str, path: str) -> Config:
        """Set the descriptor directory for one service manager (rcd, launchd, systemd)."""
        self._check_not_built()
        if not hasattr(self._data.service_dirs, manager):
            raise ValueError(f"Unknown service manager: {manager}")
        setattr(self._data.service_dirs, manager, expand_path(path))
        return self

    def rc_conf(self, *paths: str) -> Config:
        """Replace the list of boot configuration files read on rc.d hosts."""
        self._check_not_built()
        self._data.rc.files = [expand_path(p) for p in paths]
        return self

    def launchd_dirs(self, working_dir: str, log_dir: str) -> Config:
        """Set the working and log directories written into property lists."""
        self._check_not_built()
        self._data.launchd.working_dir = working_dir
        self._data.launchd.log_dir = log_dir
        return self

    def log_file(self, path: str) -> Config:
        """Set the log file path."""
        self._check_not_built()
        self._data.logging.file = expand_path(path)
        return self

    def log_level(self, level: str) -> Config:
        """Set the log level."""
        self._check_not_built()
        self._data.logging.level = level.upper()
        return self

    def save(self) -> Config:
        """Save configuration to file."""
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, "w") as f:
            json.dump(self._to_dict(), f, indent=2)
        return self

    def build(self) -> ConfigData:
        """Build and return the configuration data."""
        self._built = True
        return self._data

    @property
    def data(self) -> ConfigData:
        """Get the configuration data without marking as built."""
        return self._data

    def __repr__(self) -> str:
        return f"Config(path={self._config_path})"


def load_config(config_path: Optional[Path] = None) -> ConfigData:
    """Load configuration from file, falling back to defaults."""
    return Config(config_path).data
