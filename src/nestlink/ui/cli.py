from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from nestlink.app import (
    acknowledge_part_feedback,
    acknowledge_program_feedback,
    configure_district,
    export_feedback,
    export_program_remnants,
    export_program_sheets,
    push_source_demand,
    push_source_inventory,
    push_source_program_update,
)
from nestlink.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from nestlink.domain.reconciliation import ReconcileResult

log = logging.getLogger(__name__)

PUSH_COMMANDS = ("push-demand", "push-inventory", "push-program-update")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile Source pushes into the Target staging log"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("push-demand", "Apply Source demand calls"),
        ("push-inventory", "Apply Source inventory calls"),
        ("push-program-update", "Accept approved program revisions"),
    ):
        push = subparsers.add_parser(command, help=help_text)
        push.add_argument(
            "payloads",
            type=Path,
            help="JSON-lines file, one Source call per line",
        )

    feedback = subparsers.add_parser("feedback", help="Print collected Target feedback as JSON")
    feedback.add_argument(
        "--sheets",
        action="store_true",
        help="Include the sheets each posted program nests on",
    )
    feedback.add_argument(
        "--remnants",
        action="store_true",
        help="Include the remnants each posted program produces",
    )

    ack_program = subparsers.add_parser("ack-program", help="Acknowledge program feedback rows")
    ack_program.add_argument("ids", type=int, nargs="+", help="Program feedback ids")

    ack_part = subparsers.add_parser("ack-part", help="Acknowledge part feedback rows")
    ack_part.add_argument("ids", type=int, nargs="+", help="Part feedback ids")

    configure = subparsers.add_parser("configure", help="Route a Source system to a district")
    configure.add_argument("system", type=str, help="Source system code (up to 3 characters)")
    configure.add_argument("--district", type=int, required=True, help="Target district")
    configure.add_argument(
        "--remnant-template",
        type=str,
        help="Remnant geometry path containing the <sheet_name> placeholder",
    )

    return parser.parse_args(list(argv))


def _read_payloads(path: Path) -> list[dict[str, Any]]:
    payloads: list[dict[str, Any]] = []
    with path.open(encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                payload = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{number}: invalid JSON") from exc
            if not isinstance(payload, dict):
                raise ValueError(f"{path}:{number}: expected a JSON object")
            payloads.append(payload)
    return payloads


def _push(command: str, payloads: list[dict[str, Any]]) -> list[ReconcileResult]:
    if command == "push-demand":
        return push_source_demand(payloads)
    if command == "push-inventory":
        return push_source_inventory(payloads)
    return push_source_program_update(payloads)


def _summarise(results: Sequence[ReconcileResult]) -> None:
    misses = sum(1 for result in results if result.is_lookup_miss)
    written = sum(result.entries_written for result in results)
    log.info("Processed %d calls: staged=%d, lookup misses=%d", len(results), written, misses)


def _print_feedback(*, sheets: bool, remnants: bool) -> None:
    document = export_feedback().to_payload()
    if sheets:
        document["sheets"] = [item.to_payload() for item in export_program_sheets()]
    if remnants:
        document["remnants"] = [item.to_payload() for item in export_program_remnants()]
    json.dump(document, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _acknowledge(ids: Sequence[int], *, part: bool) -> None:
    acknowledge = acknowledge_part_feedback if part else acknowledge_program_feedback
    removed = sum(1 for feedback_id in ids if acknowledge(feedback_id))
    log.info("Acknowledged %d of %d feedback rows", removed, len(ids))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command in PUSH_COMMANDS:
            payloads = _read_payloads(parsed_args.payloads)
            _summarise(_push(parsed_args.command, payloads))
        elif parsed_args.command == "feedback":
            _print_feedback(sheets=parsed_args.sheets, remnants=parsed_args.remnants)
        elif parsed_args.command == "ack-program":
            _acknowledge(parsed_args.ids, part=False)
        elif parsed_args.command == "ack-part":
            _acknowledge(parsed_args.ids, part=True)
        elif parsed_args.command == "configure":
            config = configure_district(
                parsed_args.system,
                district=parsed_args.district,
                remnant_template=parsed_args.remnant_template,
            )
            log.info("Source system %s routes to district %s", config.system, config.district)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
