# -*- coding: utf-8 -*-
"""
コマンドラインから盤面を解くためのエントリポイントです。

    python -m linesolver puzzle.txt
    python -m linesolver < puzzle.txt

解が見つかれば色ごとの辺の一覧を標準出力に表示し、
最後に探索にかかった時間を表示します。
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from . import load_grid, solve_grid
from .config import LOG_LEVEL
from .errors import PuzzleInputError
from .logging_utils import get_logger, set_log_level
from .postprocess.render_result import format_solution

EXIT_SOLVED = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_SOLUTION = 2

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linesolver",
        description="Solve a beveled line-connection puzzle.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="puzzle file (one row per line). Reads stdin when omitted.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        help="logging level for the solver (default: %(default)s)",
    )
    return parser


def read_source(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_log_level(args.log_level)

    try:
        text = read_source(args.path)
    except (OSError, UnicodeDecodeError) as e:
        # 読めないファイルも入力エラーとして扱う
        logger.error("cannot read puzzle: %s", e)
        return EXIT_INPUT_ERROR

    try:
        grid = load_grid(text)
    except PuzzleInputError as e:
        logger.error("%s", e)
        return EXIT_INPUT_ERROR

    logger.warning("start solving")
    started = time.perf_counter()

    result = solve_grid(grid)
    if result.solved:
        for line in format_solution(result.edges):
            print(line)

    elapsed = time.perf_counter() - started
    print(f"Running takes {elapsed:.3f} seconds.")

    return EXIT_SOLVED if result.solved else EXIT_NO_SOLUTION


if __name__ == "__main__":
    sys.exit(main())
