"""Path expansion and file writing utilities."""

import os
import tempfile
from pathlib import Path
from typing import Union


def expand_path(path: Union[str, Path]) -> Path:
    """Expand ~ and environment variables in a path."""
    return Path(os.path.expandvars(str(path))).expanduser().resolve()


def ensure_parent_exists(path: Union[str, Path]) -> Path:
    """Ensure the parent directory of a path exists, creating it if necessary."""
    path = expand_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def get_config_dir() -> Path:
    """Get the daemonctl configuration directory (~/.daemonctl)."""
    return Path("~/.daemonctl").expanduser()


def get_config_file() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.json"


def get_log_file() -> Path:
    """Get the default log file path."""
    return get_config_dir() / "daemonctl.log"


def write_atomic(path: Union[str, Path], content: str, mode: int = 0o644) -> Path:
    """
    Write text to a file so readers see either the old file or the new one.

    The content goes to a temporary file in the target directory which is
    then renamed over ``path``. If anything fails before the rename the
    temporary file is removed and ``path`` is left untouched.

    Args:
        path: Destination file. Its directory must already exist.
        content: Text to write.
        mode: Permission bits applied before the rename.

    Returns:
        The destination path.
    """
    path = Path(path)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        prefix=f".{path.name}.",
        suffix=".tmp",
    ) as fh:
        tmp_path = Path(fh.name)
        try:
            fh.write(content)
        except BaseException:
            fh.close()
            tmp_path.unlink(missing_ok=True)
            raise

    try:
        os.chmod(tmp_path, mode)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return path
