"""Main CLI entry point."""

from __future__ import annotations

import argparse
import sys

from daemonctl import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="daemonctl",
        description="Install and control a background service with the host's service manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  daemonctl install -n myd -d "My daemon" -p /usr/local/bin/myd -- --port 8080
  daemonctl start -n myd
  daemonctl status -n myd
  daemonctl stop -n myd
  daemonctl remove -n myd
  daemonctl run -n myd -- /usr/local/bin/myd --port 8080

Service managers: rc.d (FreeBSD), launchd (macOS), systemd (Linux)
Config: ~/.daemonctl/config.json
""",
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"daemonctl {__version__}",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )

    subparsers = parser.add_subparsers(
        dest="command_name",
        metavar="<command>",
        title="Commands",
    )

    from daemonctl.cli.commands import service

    service.register_commands(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command_name is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except Exception as e:
        if not args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
