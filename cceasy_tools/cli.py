"""
Command-line front end.

Usage:
    cceasy-tools status [TOOL ...] [--json]
    cceasy-tools install TOOL
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from .config import load_config
from .detection import ToolStatus
from .installer import InstallError
from .logging_config import setup_logging
from .manager import ToolManager
from .tools import KNOWN_TOOLS

TOOL_NAMES = [tool.value for tool in KNOWN_TOOLS]


def render_table(statuses: Sequence[ToolStatus]) -> str:
    """Render statuses as a pipe-delimited table: tool|installed|version|path."""
    lines = ["tool|installed|version|path"]
    for status in statuses:
        installed = "yes" if status.installed else "no"
        lines.append(f"{status.name}|{installed}|{status.version}|{status.path}")
    return "\n".join(lines)


def cmd_status(manager: ToolManager, args: argparse.Namespace) -> int:
    if args.tools:
        statuses = [manager.get_tool_status(name) for name in args.tools]
    else:
        statuses = manager.check_all_tools_status()

    if args.json:
        print(json.dumps([s.to_dict() for s in statuses], indent=2))
    else:
        print(render_table(statuses))
    return 0


def cmd_install(manager: ToolManager, args: argparse.Namespace) -> int:
    try:
        manager.install_tool(args.tool)
    except InstallError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.remediation:
            print(f"Hint: {e.remediation}", file=sys.stderr)
        return 1

    status = manager.get_tool_status(args.tool)
    print(f"Installed {args.tool}" + (f" {status.version}" if status.version else ""))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cceasy-tools",
        description="Detect and install the claude, gemini and codex command-line assistants",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--config", help="Path to a YAML or JSON config file")
    parser.add_argument("--log-file", help="Also write logs to this file")

    sub = parser.add_subparsers(dest="command", required=True)

    status = sub.add_parser("status", help="Show which tools are installed")
    status.add_argument("tools", nargs="*", metavar="TOOL", help=f"Tools to check (default: {', '.join(TOOL_NAMES)})")
    status.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    status.set_defaults(handler=cmd_status)

    install = sub.add_parser("install", help="Install a tool into the local root")
    install.add_argument("tool", metavar="TOOL", help=f"One of: {', '.join(TOOL_NAMES)}")
    install.set_defaults(handler=cmd_install)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, verbose=args.verbose)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        level=config.log_level,
        log_file=args.log_file or config.log_file or None,
        verbose=args.verbose,
        quiet=args.quiet,
    )

    manager = ToolManager(config=config, verbose=args.verbose)
    return args.handler(manager, args)


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
