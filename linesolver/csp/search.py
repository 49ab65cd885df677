# -*- coding: utf-8 -*-
"""
色ごとの深さ優先探索（バックトラック）を行うモジュールです。

ざっくり流れ
------------
1. Red の端点を探し、そこから 8 方向に辺を置いてみる
2. 置けたら、その先のマスから再帰的に続ける
3. 同じ色のもう一方の端点に着いたら、その色が完成しているか調べる
4. 完成していれば次の色（Green → Blue）を同じように解く
5. 最後の色まで完成したら、白マスの本数がぴったりかを調べる
6. どこかで行き詰まったら、直前に置いた辺を remove_edge で取り消し、
   次の方向を試す

盤面は 1 つだけで、コピーは作りません。
「置く → ダメなら取り消す」を必ず同じ関数の中で対にしているので、
探索が全部失敗したときは盤面が読み込み直後の状態に戻ります。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import SEARCH_PROGRESS_INTERVAL
from ..grid.directions import SEARCH_ORDER
from ..logging_utils import get_logger
from ..types import COLOR_ORDER, Color, Position
from .board import Board
from .checks import color_solved, white_solved

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    board: Board
    progress_interval: int = SEARCH_PROGRESS_INTERVAL

    solved: bool = False
    nodes_visited: int = 0
    backtracks: int = 0


def solve_color(ctx: SearchContext, color: Color) -> bool:
    """
    color の線を引きます。成功したら、その先の色もすべて解けています。

    color の端点が盤面になければ、その色は飛ばして次の色へ進みます。
    """
    board = ctx.board
    start = board.find_endpoint(color)
    if start is None:
        logger.info("no start found for color %s", color)
        return move_to_next_color(ctx, color)

    logger.info("solving color %s", color)
    if logger.isEnabledFor(logging.DEBUG):
        for line in board.describe():
            logger.debug("  %s", line)

    board.mark_start(start)
    res = depth_first_search(ctx, start, color)
    if not res:
        # 前の色に戻る前に、始点に数えた 1 本を戻しておく
        logger.info("backtrack to previous color")
        board.unmark_start(start)
    return res


def move_to_next_color(ctx: SearchContext, color: Color) -> bool:
    """
    次の色を解きます。最後の色なら白マスの判定をして終わります。
    """
    next_color = color.next()
    if next_color is not None:
        logger.info("move to next color from %s to %s", color, next_color)
        return solve_color(ctx, next_color)

    logger.info("all color connected")
    if white_solved(ctx.board):
        return True

    logger.info("white not solved, backtrack")
    return False


def depth_first_search(ctx: SearchContext, position: Position, color: Color) -> bool:
    """
    position から color の線を伸ばします。

    方向は Right, DownRight, Down, DownLeft, Left, UpLeft, Up, UpRight の順に試します。
    同じ色の端点に着いた枝はそこで止め、その色が完成していれば次の色へ進みます。
    次の色が解けなかった場合も、同じマスから残りの方向を試し続けます。
    """
    board = ctx.board
    ctx.nodes_visited += 1
    if ctx.progress_interval and ctx.nodes_visited % ctx.progress_interval == 0:
        logger.info(
            "[search] nodes_visited = %d, backtracks = %d, edges = %d",
            ctx.nodes_visited, ctx.backtracks, len(board.result),
        )

    for direction in SEARCH_ORDER:
        if not board.add_edge(position, direction, color):
            continue

        next_point = direction.step(position)
        if board.symbol_at(next_point) == color.endpoint:
            if color_solved(board, color):
                logger.info("solved color %s", color)
                if move_to_next_color(ctx, color):
                    return True
                # 次の色が解けなかったので、この色の別の引き方を探す
            else:
                logger.debug("color %s reach to end but not all connected", color)
        elif depth_first_search(ctx, next_point, color):
            return True

        board.remove_edge(position, direction)
        ctx.backtracks += 1

    return False


def run_search(board: Board) -> SearchContext:
    """
    最初の色から探索を始めます。結果は ctx と board に残ります。

    Returns
    -------
    SearchContext
        成否（solved）と統計情報を持つ探索コンテキスト。
    """
    ctx = SearchContext(board=board)
    ctx.solved = solve_color(ctx, COLOR_ORDER[0])
    return ctx
