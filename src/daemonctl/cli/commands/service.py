"""Service lifecycle commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from daemonctl.cli.formatters import (
    print_error,
    print_info,
    print_json,
    print_status,
    print_success,
    print_warning,
)
from daemonctl.core.config import load_config
from daemonctl.core.runner import CommandExecutable
from daemonctl.service.base import STATUS_UNDEFINED, ActionResult, ServiceManager
from daemonctl.service.factory import get_platform_name, is_service_supported, new_daemon
from daemonctl.utils.logging import setup_logging
from daemonctl.utils.paths import get_log_file


def _manager(args: argparse.Namespace) -> ServiceManager:
    config = load_config(Path(args.config) if args.config else None)
    return new_daemon(
        args.name,
        args.description or args.name,
        args.path or "",
        args.depends or (),
        config=config,
    )


def _report(result: ActionResult) -> int:
    if result.ok:
        print_success(result.message)
        return 0
    print_error(result.message)
    print_error(str(result.error))
    return 1


def _check_supported() -> bool:
    if not is_service_supported():
        print_error(f"Service management not supported on this platform ({get_platform_name()})")
        return False
    return True


def cmd_install(args: argparse.Namespace) -> int:
    """Install the service descriptor."""
    if not _check_supported():
        return 1
    manager = _manager(args)
    print_info(f"Installing {args.name} ({manager.platform_name})...")
    result = _report(manager.install(*args.args))
    if result == 0:
        print_info(f"Descriptor: {manager.service_path()}")
        print_info(f"Start the service with: daemonctl start --name {args.name}")
    return result


def cmd_remove(args: argparse.Namespace) -> int:
    """Remove the service descriptor."""
    if not _check_supported():
        return 1
    return _report(_manager(args).remove())


def cmd_start(args: argparse.Namespace) -> int:
    """Start the installed service."""
    if not _check_supported():
        return 1
    return _report(_manager(args).start())


def cmd_stop(args: argparse.Namespace) -> int:
    """Stop the running service."""
    if not _check_supported():
        return 1
    return _report(_manager(args).stop())


def cmd_status(args: argparse.Namespace) -> int:
    """Show whether the service is installed and running."""
    if not _check_supported():
        return 1
    manager = _manager(args)
    running, error = manager.query_status()

    if error is not None:
        installed, _ = manager.is_installed()
        if args.json:
            print_json({"name": args.name, "installed": installed, "error": str(error)})
        elif not installed:
            print_warning(f"{args.name} is not installed")
        else:
            print_error(f"{STATUS_UNDEFINED}: {error}")
        return 1

    if args.json:
        print_json({
            "name": args.name,
            "installed": True,
            "running": running.running,
            "pid": running.pid,
            "message": running.message,
        })
    else:
        print_status(args.name, "running" if running.running else "stopped", running.message)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Run a command in the foreground as the service workload."""
    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        print_error("No command given; usage: daemonctl run --name NAME -- COMMAND [ARGS...]")
        return 2

    config = load_config(Path(args.config) if args.config else None)
    setup_logging(
        log_file=config.logging.file or get_log_file(),
        level=config.logging.level,
    )
    manager = new_daemon(args.name, args.description or args.name, command[0], config=config)
    result = manager.run(CommandExecutable(command))
    return 0 if result.ok else 1


def _add_service_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-n", "--name", required=True, help="Service name")
    parser.add_argument(
        "-d", "--description",
        default=None,
        help="Service description (defaults to the name)",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Config file (default: ~/.daemonctl/config.json)",
    )


def register_commands(subparsers: argparse._SubParsersAction) -> None:
    """Register service management commands."""
    # install
    install_parser = subparsers.add_parser(
        "install",
        help="Write the service descriptor",
    )
    _add_service_arguments(install_parser)
    install_parser.add_argument(
        "-p", "--path",
        default=None,
        help="Executable to register (default: this program)",
    )
    install_parser.add_argument(
        "--depends",
        action="append",
        metavar="SERVICE",
        help="Service that must be started first (repeatable)",
    )
    install_parser.add_argument(
        "args",
        nargs="*",
        help="Arguments passed to the executable",
    )
    install_parser.set_defaults(func=cmd_install)

    for name, func, help_text in (
        ("remove", cmd_remove, "Delete the service descriptor"),
        ("start", cmd_start, "Start the service"),
        ("stop", cmd_stop, "Stop the service"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _add_service_arguments(sub)
        sub.set_defaults(func=func, path=None, depends=None)

    # status
    status_parser = subparsers.add_parser(
        "status",
        help="Show whether the service is running",
    )
    _add_service_arguments(status_parser)
    status_parser.add_argument(
        "--json",
        action="store_true",
        help="Print status as JSON",
    )
    status_parser.set_defaults(func=cmd_status, path=None, depends=None)

    # run
    run_parser = subparsers.add_parser(
        "run",
        help="Run a command in the foreground as the workload",
    )
    _add_service_arguments(run_parser)
    run_parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to run, after --",
    )
    run_parser.set_defaults(func=cmd_run)
