"""Command-line runner for heightmap puzzles."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from .config import settings
from .core import InsufficientBasinsError
from .io import MalformedGridError
from .puzzles import PUZZLES, PartFn, PartResult, Puzzle, get_puzzle, last_puzzle, list_puzzles

logger = structlog.get_logger()

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INSUFFICIENT_BASINS = 2


def configure_logging(level: str = "INFO", fmt: str = "plain") -> None:
    """Route structlog through stdlib logging on stderr, keeping stdout for answers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def run_part(label: str, part_fn: PartFn, raw_input: str, expected: Optional[int] = None) -> PartResult:
    """Run one puzzle part and print its answer against the expected one."""
    result = part_fn(raw_input, expected)

    if result.matches is None:
        print(f"-- {label}: {result.value} ?")
    elif result.matches:
        print(f"✅ {label}: {result.value} (same as expected)")
    else:
        print(f"❌ {label}: expected {result.expected} but got {result.value} !!")

    logger.info("Part finished", part=label, value=result.value,
                expected=result.expected, matches=result.matches)
    return result


def run_puzzle(puzzle: Puzzle, input_path: Path,
               expected_part1: Optional[int] = None,
               expected_part2: Optional[int] = None) -> int:
    """
    Run both parts of a puzzle on one input file.

    Args:
        puzzle: Registered puzzle to run
        input_path: Text file holding the puzzle input
        expected_part1: Known part 1 answer, if any
        expected_part2: Known part 2 answer, if any

    Returns:
        Process exit code
    """
    print(f"=>> {puzzle.name} <<=")
    try:
        raw_input = Path(input_path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Could not read puzzle input", puzzle=puzzle.name,
                     path=str(input_path), error=str(e))
        return EXIT_USAGE

    try:
        run_part("Part1", puzzle.part1, raw_input, expected_part1)
        run_part("Part2", puzzle.part2, raw_input, expected_part2)
    except MalformedGridError as e:
        logger.error("Malformed puzzle input", puzzle=puzzle.name,
                     path=str(input_path), line=e.line, column=e.column, error=str(e))
        return EXIT_USAGE
    except InsufficientBasinsError as e:
        logger.error("Not enough basins for part 2", puzzle=puzzle.name,
                     available=e.available, required=e.required)
        return EXIT_INSUFFICIENT_BASINS

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-heightmap",
        description="Run heightmap puzzles by name",
    )
    parser.add_argument(
        "puzzle", nargs="?",
        help="Puzzle to run: 'all', 'last' or one of: " + ", ".join(list_puzzles()),
    )
    parser.add_argument(
        "input_path", nargs="?", type=Path,
        help="Custom input file (defaults to <inputs_dir>/<puzzle>.txt)",
    )
    parser.add_argument("--expect-part1", type=int, help="Known part 1 answer")
    parser.add_argument("--expect-part2", type=int, help="Known part 2 answer")
    parser.add_argument("--log-level", default=None, help="Override HEIGHTMAP_LOG_LEVEL")
    parser.add_argument("--log-format", choices=["json", "plain"], default=None,
                        help="Override HEIGHTMAP_LOG_FORMAT")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or settings.log_level,
                      args.log_format or settings.log_format)

    if args.puzzle is None:
        parser.print_usage()
        print(f"Where <puzzle> is either 'all', 'last' or one of: {', '.join(list_puzzles())}")
        return EXIT_USAGE

    if args.puzzle == "all":
        for puzzle in PUZZLES.values():
            status = run_puzzle(puzzle, puzzle.default_input)
            if status != EXIT_OK:
                return status
        return EXIT_OK

    if args.puzzle == "last":
        puzzle = last_puzzle()
    else:
        puzzle = get_puzzle(args.puzzle)
        if puzzle is None:
            print(f"Unknown puzzle '{args.puzzle}'")
            return EXIT_USAGE

    input_path = args.input_path or puzzle.default_input
    return run_puzzle(puzzle, input_path, args.expect_part1, args.expect_part2)


if __name__ == "__main__":
    sys.exit(main())
