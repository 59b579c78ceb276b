"""Command line harness for the peekable MT19937 generator."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "mt_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from mtpeek.mt19937 import DEFAULT_SEED, LOOKAHEAD_GENERATIONS
from mtpeek.report import RunConfig, run_report


def _parse_offset_list(value: str) -> tuple[int, ...]:
    """Parse a CLI `offsets=0,624,625` style option into a tuple of offsets."""

    if not value:
        return ()

    if "=" in value:
        key, _, payload = value.partition("=")
        if key.strip().lower() not in {"offset", "offsets"}:
            raise argparse.ArgumentTypeError(
                f"Expected prefix 'offset=' or 'offsets=', received '{value}'."
            )
    else:
        payload = value

    if not payload:
        raise argparse.ArgumentTypeError("Offset list cannot be empty.")

    try:
        offsets = tuple(int(part.strip(), 0) for part in payload.split(",") if part.strip())
    except ValueError as exc:  # pragma: no cover - argparse surface ensures message
        raise argparse.ArgumentTypeError("Offset list must contain integers.") from exc

    if any(offset < 0 for offset in offsets):
        raise argparse.ArgumentTypeError("Offsets must be non-negative integers.")

    return offsets


def _parse_count(value: str) -> int:
    try:
        count = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Value must be non-negative.")
    return count


def _parse_lookahead(value: str) -> int:
    lookahead = _parse_count(value)
    if lookahead < 1:
        raise argparse.ArgumentTypeError("Lookahead must buffer at least one generation.")
    return lookahead


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw and peek MT19937 outputs deterministically")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=DEFAULT_SEED,
        help="Generator seed (accepts decimal or 0x-prefixed hex, reduced modulo 2**32)",
    )
    parser.add_argument("--count", type=_parse_count, default=5, help="Number of words to draw")
    parser.add_argument(
        "--skip",
        type=_parse_count,
        default=0,
        help="Words to consume and discard before peeking and drawing",
    )
    parser.add_argument(
        "--peek",
        metavar="offsets=list",
        type=_parse_offset_list,
        default=(),
        help="Comma-separated forward offsets to inspect without consuming (e.g. offsets=0,624)",
    )
    parser.add_argument(
        "--lookahead",
        type=_parse_lookahead,
        default=LOOKAHEAD_GENERATIONS,
        help="Number of generations kept in the lookahead buffer",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity written to stderr",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "mt_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)

    cfg = RunConfig(
        seed=args.seed,
        count=args.count,
        skip=args.skip,
        peek_offsets=args.peek,
        lookahead=args.lookahead,
    )
    result = run_report(cfg)

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logging.getLogger("mtpeek.cli").info("report written to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
