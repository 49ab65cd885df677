# -*- coding: utf-8 -*-
"""
linesolver パッケージの入口となるモジュールです。

    from linesolver import solve

と呼び出されることを想定しています。

ここでは、盤面（テキストまたは pandas.DataFrame）を受け取り、
1. 盤面の読み込みと正規化
2. 端点の個数チェック
3. 色ごとの深さ優先探索
4. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

import sys
from typing import Any, Dict, Iterable, Union

import numpy as np
import pandas as pd

from .config import RECURSION_DEPTH_PER_CELL, RECURSION_HEADROOM, SEARCH_TRACE_ENABLED
from .csp.board import Board
from .csp.search import run_search
from .errors import EndpointCountError, PuzzleFormatError, PuzzleInputError
from .grid.parser import grid_to_lines, normalize_grid, parse_grid
from .grid.validator import validate_endpoints
from .logging_utils import get_logger, get_search_trace_logger
from .postprocess.render_result import build_result
from .types import Color, Edge, SolveResult

__version__ = "1.0.0"
__all__ = [
    "solve",
    "solve_grid",
    "load_grid",
    "Board",
    "Color",
    "Edge",
    "SolveResult",
    "PuzzleInputError",
    "PuzzleFormatError",
    "EndpointCountError",
]

logger = get_logger()


def load_grid(source: Union[str, Iterable[str], pd.DataFrame]) -> np.ndarray:
    """
    テキスト・行のリスト・DataFrame のどれかから盤面を読み込み、
    端点の個数までチェックした numpy 配列を返します。
    """
    if isinstance(source, pd.DataFrame):
        grid = normalize_grid(source)
    else:
        grid = parse_grid(source)

    validate_endpoints(grid)
    return grid


def solve_grid(grid: np.ndarray) -> SolveResult:
    """
    正規化済みの盤面を解きます。

    解けなかった場合も例外にはせず、``solved=False`` の結果を返します。
    """
    height, width = grid.shape
    trace_logger = get_search_trace_logger() if SEARCH_TRACE_ENABLED else None
    board = Board.from_grid(grid, trace_logger=trace_logger)

    # 経路が長いほど再帰が深くなるので、盤面の大きさに合わせて上限を上げる
    old_limit = sys.getrecursionlimit()
    needed = RECURSION_DEPTH_PER_CELL * width * height + RECURSION_HEADROOM
    sys.setrecursionlimit(max(old_limit, needed))
    try:
        ctx = run_search(board)
    finally:
        sys.setrecursionlimit(old_limit)

    if ctx.solved:
        logger.info("solution found")
    else:
        logger.warning("no solution")

    return SolveResult(
        solved=ctx.solved,
        edges=list(board.result),
        shape=(height, width),
        nodes_visited=ctx.nodes_visited,
        backtracks=ctx.backtracks,
    )


def solve(source: Union[str, Iterable[str], pd.DataFrame]) -> Dict[str, Any]:
    """
    盤面を解くメイン関数。

    Parameters
    ----------
    source : str, list of str or pandas.DataFrame
        1 行 1 文字列のテキスト、行のリスト、または 1 セル 1 記号の DataFrame。

    Returns
    -------
    dict
        :func:`linesolver.postprocess.render_result.build_result` の辞書。

    Raises
    ------
    PuzzleInputError
        盤面の形式が不正、または端点の個数が 0/2 以外の色がある場合。
    """
    logger.info("=== solve() START ===")
    grid = load_grid(source)
    logger.info("Grid shape: %s", grid.shape)
    for line in grid_to_lines(grid):
        logger.debug("  %s", line)

    result = solve_grid(grid)

    logger.info("=== solve() END ===")
    return build_result(result)
