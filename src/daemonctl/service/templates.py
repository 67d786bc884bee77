"""Service descriptor templates and the renderer that fills them."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from daemonctl.service.errors import TemplateError

RCD_SCRIPT_TEMPLATE = """\
#!/bin/sh
#
# PROVIDE: {name}
# REQUIRE: {requires}
# KEYWORD:

# Add the following lines to /etc/rc.conf to enable the {name}:
#
# {name}_enable="YES"
#


. /etc/rc.subr

name="{name}"
rcvar="{name}_enable"
command="{path}"
pidfile="/var/run/$name.pid"

start_cmd="/usr/sbin/daemon -p $pidfile -f $command {args}"
load_rc_config $name
run_rc_command "$1"
"""

LAUNCHD_PLIST_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>KeepAlive</key>
    <true/>
    <key>Label</key>
    <string>{name}</string>
    <key>ProgramArguments</key>
    <array>
        <string>{path}</string>
{program_arguments}    </array>
    <key>RunAtLoad</key>
    <true/>
    <key>WorkingDirectory</key>
    <string>{working_dir}</string>
    <key>StandardErrorPath</key>
    <string>{log_dir}/{name}.err</string>
    <key>StandardOutPath</key>
    <string>{log_dir}/{name}.log</string>
</dict>
</plist>
"""

SYSTEMD_UNIT_TEMPLATE = """\
[Unit]
Description={description}
Requires={dependencies}
After={dependencies}

[Service]
Type=simple
ExecStart={exec_start}
Restart=on-failure
RestartSec=5

[Install]
WantedBy=multi-user.target
"""


def render(
    template: str,
    record,
    args: Sequence[str] = (),
    escape: Optional[Callable[[str], str]] = None,
    **extra: str,
) -> str:
    """
    Fill a descriptor template from a service record and trailing arguments.

    The template sees ``name``, ``description``, ``path``, ``args`` (the
    trailing arguments joined with spaces) and ``dependencies`` (joined with
    spaces), plus any ``extra`` fields. When ``escape`` is given it is applied
    to every record-derived value; ``extra`` values are passed through as-is.

    Raises:
        TemplateError: If the template references an unknown field or is malformed.
    """
    quote = escape or (lambda value: value)
    fields = {
        "name": quote(record.name),
        "description": quote(record.description),
        "path": quote(record.exec_start_path),
        "args": quote(" ".join(args)),
        "dependencies": quote(" ".join(record.dependencies)),
    }
    fields.update(extra)
    try:
        return template.format(**fields)
    except (KeyError, IndexError, ValueError) as e:
        raise TemplateError(f"Cannot render service descriptor for {record.name}: {e!r}") from e
