"""
Command-line entry point.

    shiftswap request --from 2026-01-12T07:00 --to 2026-01-12T15:00 --with "Jane Doe" --reason "Kid pickup"
    shiftswap list
    shiftswap approve --id <id>
    shiftswap deny --id <id>
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import ConfigLoader, ShiftSwapConfig
from .errors import ShiftSwapError
from .logging import configure_logging
from .persistence import RequestStore
from .requests import RequestLifecycle, SwapRequest

TABLE_COLUMNS = ("id", "status", "from", "to", "with", "reason", "updatedAt")


def build_parser() -> argparse.ArgumentParser:
    """Construct the argparse parser with one subcommand per operation."""
    p = argparse.ArgumentParser(prog="shiftswap", description="Record and review shift-swap requests.")
    p.add_argument("--data-file", type=Path, help="Path to requests.json (overrides config)")
    p.add_argument("--config", type=Path, help="YAML config file (default: $SHIFTSWAP_CONFIG)")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    p.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    sub = p.add_subparsers(dest="command")

    req = sub.add_parser("request", help="Create a new swap request")
    req.add_argument("--from", dest="from_ts", default="", help="Shift start, e.g. 2026-01-12T07:00")
    req.add_argument("--to", dest="to_ts", default="", help="Shift end, e.g. 2026-01-12T15:00")
    req.add_argument("--with", dest="with_whom", default="", help="Colleague taking the shift")
    req.add_argument("--reason", default="", help="Why the swap is needed")

    sub.add_parser("list", help="List all requests, newest first")

    for name, verb in (("approve", "Approve"), ("deny", "Deny")):
        review = sub.add_parser(name, help=f"{verb} a request")
        review.add_argument("--id", dest="request_id", required=True, help="Request id")

    return p


def _load_config(args: argparse.Namespace) -> ShiftSwapConfig:
    overrides: dict = {}
    if args.data_file is not None:
        overrides.setdefault("store", {})["data_file"] = str(args.data_file)
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    if args.json_logs:
        overrides.setdefault("logging", {})["format_json"] = True
    return ConfigLoader.create(args.config).load(overrides)


def render_table(requests: Sequence[SwapRequest]) -> str:
    """Plain left-aligned table of the columns reviewers care about."""
    rows = [[str(r.to_dict()[col]) for col in TABLE_COLUMNS] for r in requests]
    widths = [max([len(col)] + [len(row[i]) for row in rows]) for i, col in enumerate(TABLE_COLUMNS)]

    def fmt(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt(TABLE_COLUMNS), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Run one command and return the process exit code."""
    out = out or sys.stdout
    err = err or sys.stderr

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on usage errors; every failure here exits 1
        return 0 if e.code in (0, None) else 1
    if args.command is None:
        parser.print_help(out)
        return 0

    try:
        config = _load_config(args)
        configure_logging(
            level=config.logging.level,
            format_json=config.logging.format_json,
            stream=err,
        )
        lifecycle = RequestLifecycle(
            RequestStore(config.store.data_file, indent=config.store.indent),
            token_bytes=config.ids.token_bytes,
        )

        if args.command == "request":
            record = lifecycle.create_request(args.from_ts, args.to_ts, args.with_whom, args.reason)
            print("Request created", file=out)
            print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False), file=out)
        elif args.command == "list":
            requests = lifecycle.list_requests()
            print(render_table(requests) if requests else "No requests yet.", file=out)
        else:
            review = lifecycle.approve if args.command == "approve" else lifecycle.deny
            record = review(args.request_id)
            print(f"Request {record.id} {record.status.value}", file=out)

    except ShiftSwapError as e:
        print(f"Error: {e}", file=err)
        return 1

    return 0


def main_entry() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())
