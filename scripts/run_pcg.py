"""Command line harness for PCG32 draw runs."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pcg_random import DEFAULT_STREAM, DrawConfig, PcgError, run_draws
from pcg_random.draws import MODES


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed hex integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Expected a decimal or 0x-prefixed integer, received '{value}'."
        ) from exc


def _parse_count(value: str) -> int:
    count = _parse_int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Count must be a non-negative integer.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw values from a PCG32 generator")
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=None,
        help="Generator seed (decimal or 0x-prefixed hex); defaults to the system clock",
    )
    parser.add_argument(
        "--stream",
        type=_parse_int,
        default=DEFAULT_STREAM,
        help="Stream selector; the low bit is always forced on",
    )
    parser.add_argument("--count", type=_parse_count, default=10, help="Number of draws to perform")
    parser.add_argument("--mode", choices=MODES, default="u32", help="Kind of value to draw")
    parser.add_argument(
        "--max",
        dest="max_value",
        type=_parse_int,
        default=6,
        help="Exclusive upper bound for the 'below' and 'range' modes",
    )
    parser.add_argument(
        "--min",
        dest="min_value",
        type=_parse_int,
        default=0,
        help="Inclusive lower bound for the 'range' mode",
    )
    parser.add_argument(
        "--bytes",
        dest="byte_length",
        type=_parse_count,
        default=16,
        help="Bytes per draw in the 'bytes' mode",
    )
    parser.add_argument("--verbose", action="store_true", help="Log generator activity to stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        cfg = DrawConfig(
            seed=args.seed,
            stream=args.stream,
            count=args.count,
            mode=args.mode,
            max_value=args.max_value,
            min_value=args.min_value,
            byte_length=args.byte_length,
        )
        result = run_draws(cfg)
    except PcgError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
