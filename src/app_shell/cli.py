import argparse
import logging
import sys
from pathlib import Path

from src.app_shell.config import AppConfig, configure_logging
from src.components.participants import AddParticipantInput
from src.domain.coerce import format_number, to_number
from src.rules.loader import load_rules
from src.ui.state import AppState
from src.ui.views.meeting import COLUMNS, build_rows

logger = logging.getLogger("cli")


def participant_arg(value: str) -> AddParticipantInput:
    """Parse NAME=SALARY. The name may itself contain '='; the last one splits."""
    name, sep, salary = value.rpartition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=SALARY, got {value!r}")
    return AddParticipantInput(name=name, salary=to_number(salary))


def format_table(rows: list[list[str]]) -> str:
    header = list(COLUMNS[:3])
    widths = [max(len(r[i]) for r in [header, *rows]) for i in range(3)]
    lines = []
    for row in [header, *rows]:
        # Name left-aligned, amounts right-aligned
        cells = [row[0].ljust(widths[0])] + [c.rjust(w) for c, w in zip(row[1:], widths[1:])]
        lines.append("  ".join(cells).rstrip())
    rule = "  ".join("-" * w for w in widths)
    lines.insert(1, rule)
    lines.insert(len(lines) - 1, rule)
    return "\n".join(lines)


def handle_estimate(state: AppState, args: argparse.Namespace) -> int:
    if args.duration is not None:
        state.set_duration(args.duration)

    rejected = 0
    for candidate in args.participant:
        state.pending_name = candidate.name
        state.pending_salary = candidate.salary
        result = state.add_participant()
        if not result.success:
            rejected += 1
            print(
                f"Skipping {candidate.name!r}: {'; '.join(result.messages)}",
                file=sys.stderr,
            )

    summary = state.summary()
    symbol = state.rules.display.currency_symbol
    print(f"Duration: {format_number(summary.duration_minutes)} minutes")
    print(f"Currency: {state.rules.display.currency_code}")
    print(format_table(build_rows(summary, symbol)))
    return 1 if rejected else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Meeting Cost Calculator CLI")
    parser.add_argument("--rules", type=Path, help="Path to rules file (default: MCC_RULES_PATH)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # estimate
    estimate_parser = subparsers.add_parser("estimate", help="Cost a meeting")
    estimate_parser.add_argument(
        "--duration", help="Meeting length in minutes (default from rules)"
    )
    estimate_parser.add_argument(
        "--participant",
        "-p",
        type=participant_arg,
        action="append",
        default=[],
        metavar="NAME=SALARY",
        help="Participant and annual salary; repeatable",
    )

    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    configure_logging(config.log_level)
    rules_path = args.rules or config.rules_path

    try:
        rules = load_rules(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    state = AppState(rules=rules)

    if args.command == "estimate":
        return handle_estimate(state, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
