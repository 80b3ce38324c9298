#!/usr/bin/env python3
"""Run one xdotool command against a given display.

Typed command, options by flag (before or after the sub-command):
  python run_xdo.py windowactivate 12345 -o sync
  python run_xdo.py --display 1 -o name -o limit=1 search firefox

Raw shell line (metacharacters are interpreted by /bin/sh):
  python run_xdo.py --shell key "ctrl+l BackSpace"

Screenshot of the root window:
  python run_xdo.py --jpeg screenshot screen.jpg
"""

import argparse
import logging
import sys
from typing import List, Optional

from xdoctl.commands import Action, Command, lookup
from xdoctl.config import XConfig
from xdoctl.options import OptionSet, OptionValue
from xdoctl.server import SpawnError, XServer
from xdoctl.xwd import CaptureError, XwdError, capture_jpeg_bytes

EXIT_SPAWN_FAILED = 127

log = logging.getLogger("xdoctl")


def parse_options(action: Action, entries: List[str]) -> OptionSet:
    """Map "flag" / "flag=value" strings (leading dashes optional) onto the action's options."""
    if not entries:
        return OptionSet()
    kind = action.option_kind
    if kind is None:
        raise ValueError(f"{action.subcommand} takes no options")

    by_flag = {member.flag.lstrip("-"): member for member in kind}
    items = []
    for entry in entries:
        flag, sep, value = entry.partition("=")
        member = by_flag.get(flag.lstrip("-"))
        if member is None:
            raise ValueError(f"{action.subcommand} does not accept {flag}")
        items.append(OptionValue(member, value) if sep else member)
    return OptionSet(*items)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run an xdotool command on an X display")
    parser.add_argument("--display", type=int, default=None,
                        help="X display number (default: from XDOCTL_DISPLAY or DISPLAY)")
    parser.add_argument("--auth", type=str, default=None,
                        help="Xauthority file (default: XAUTHORITY or ~/.Xauthority)")
    parser.add_argument("--shell", action="store_true",
                        help="run the positional arguments as one line through /bin/sh")
    parser.add_argument("-o", "--option", dest="options", action="append", default=[],
                        metavar="FLAG[=VALUE]",
                        help="option flag for the command, may be repeated")
    parser.add_argument("--jpeg", action="store_true",
                        help="screenshot: write a JPEG instead of raw xwd bytes")
    parser.add_argument("command", type=str, help="xdotool sub-command, or 'screenshot'")
    parser.add_argument("args", nargs="*",
                        help="positional arguments for the sub-command, "
                             "put \"--\" before any that start with a dash")
    return parser


def _screenshot(server: XServer, cfg: XConfig, out: str, jpeg: bool) -> int:
    if jpeg:
        try:
            data = capture_jpeg_bytes(server, cfg.screenshot_max_width, cfg.screenshot_quality)
        except (CaptureError, XwdError) as e:
            log.error("screenshot failed: %s", e)
            return 1
    else:
        result = server.screenshot()
        if not result.success:
            sys.stderr.buffer.write(result.stderr)
            return result.returncode
        data = result.stdout
    with open(out, "wb") as fh:
        fh.write(data)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    # explicit values skip the environment lookup, so a non-X11 DISPLAY is harmless
    overrides = {}
    if args.display is not None:
        overrides["display"] = args.display
    if args.auth is not None:
        overrides["auth"] = args.auth
    try:
        cfg = XConfig(**overrides)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=getattr(logging, cfg.log_level.upper(), logging.WARNING),
                        format="[%(name)s] %(message)s")
    server = XServer.from_config(cfg)

    try:
        if args.command == "screenshot":
            if len(args.args) != 1:
                parser.error("screenshot takes exactly one output path")
            return _screenshot(server, cfg, args.args[0], args.jpeg)

        try:
            action = lookup(args.command)
            command = Command(action, parse_options(action, args.options))
        except (KeyError, ValueError, TypeError) as e:
            parser.error(str(e.args[0]) if e.args else str(e))

        if args.shell:
            result = server.run(command, " ".join(args.args))
        else:
            result = server.execute(command, *args.args)
    except SpawnError as e:
        log.error("%s", e)
        return EXIT_SPAWN_FAILED

    sys.stdout.buffer.write(result.stdout)
    sys.stderr.buffer.write(result.stderr)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
