from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from strip_scheduler.config import LOG_LEVELS, Settings, load_settings
from strip_scheduler.errors import InvalidParameterError, SchedulingError
from strip_scheduler.generator import generate_task_file
from strip_scheduler.io.schedule_file import write_report
from strip_scheduler.models import ScheduleResult
from strip_scheduler.scheduler import Mode, parse_mode, schedule_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strip-scheduler",
        description="Schedule rectangular tasks on a strip of parallel units with NFDH or FFDH",
        epilog=(
            "modes:\n"
            "  nfdh TASK_FILE N          pack with Next-Fit Decreasing-Height\n"
            "  ffdh TASK_FILE N          pack with First-Fit Decreasing-Height\n"
            "  generate COUNT MAX_WIDTH MAX_DURATION\n"
            "                            write a random task file tasks<COUNT>.txt"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("mode", help="nfdh, ffdh or generate (anything else does nothing)")
    parser.add_argument("params", nargs="*", help="Mode parameters, see below")
    parser.add_argument("--schedule-file", help="Where to write the schedule (default from STRIP_SCHEDULE_FILE)")
    parser.add_argument("--json", dest="json_path", help="Also write the full result as JSON")
    parser.add_argument("--output-dir", help="Directory for generated task files (default from STRIP_TASKS_DIR)")
    parser.add_argument("--seed", type=int, help="Seed for generate mode")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default from STRIP_LOG_LEVEL)",
    )
    return parser


def _int_params(params: Sequence[str], names: Sequence[str]) -> list[int]:
    if len(params) != len(names):
        raise InvalidParameterError(f"expected {len(names)} parameter(s): {' '.join(names)}, got {len(params)}")
    values = []
    for name, raw in zip(names, params):
        try:
            values.append(int(raw))
        except ValueError:
            raise InvalidParameterError(f"{name} must be an integer, got {raw!r}") from None
    return values


def print_result(result: ScheduleResult, schedule_path: Path) -> None:
    print("Result")
    print(f"Using algorithm: {result.algorithm}")
    print(f"N: {result.strip_width}")
    print(f"Tasks count: {result.task_count}")
    print(f"T(S): {result.makespan}")
    print(f"E: {result.efficiency:.6f}")
    print(f"Time: {result.elapsed_ms:.3f} ms")
    print()
    print(f"Tasks schedule in file {schedule_path}")


def run_pack(mode: Mode, args: argparse.Namespace, settings: Settings) -> None:
    if len(args.params) != 2:
        raise InvalidParameterError(f"expected 2 parameter(s): TASK_FILE N, got {len(args.params)}")
    tasks_path = Path(args.params[0])
    (strip_width,) = _int_params(args.params[1:], ["N"])

    schedule_path = Path(args.schedule_file or settings.schedule_file)
    result = schedule_file(tasks_path, strip_width, mode, schedule_path)

    if args.json_path:
        report_path = write_report(result, args.json_path)
        logger.info(f"JSON report written to {report_path}")

    print_result(result, schedule_path)


def run_generate(args: argparse.Namespace, settings: Settings) -> None:
    count, max_width, max_duration = _int_params(args.params, ["COUNT", "MAX_WIDTH", "MAX_DURATION"])
    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed)

    path = generate_task_file(count, max_width, max_duration, args.output_dir or settings.tasks_dir, rng)
    print(f"Generated {count} tasks in file {path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # An unknown mode does nothing, whatever follows it
    if argv and not argv[0].startswith("-") and parse_mode(argv[0]) is Mode.INVALID:
        return 0

    parser = build_parser()
    args = parser.parse_args(argv)

    mode = parse_mode(args.mode)
    if mode is Mode.INVALID:
        return 0

    try:
        settings = load_settings()
    except InvalidParameterError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if mode is Mode.GENERATE:
            run_generate(args, settings)
        else:
            run_pack(mode, args, settings)
    except SchedulingError as e:
        logger.debug("scheduling run failed", exc_info=True)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
