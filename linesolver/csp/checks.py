# -*- coding: utf-8 -*-
"""
色ごとの完成判定と、盤面全体の白マス判定を行うモジュールです。

どちらも盤面を読むだけで、Board の状態は変更しません。
"""

from __future__ import annotations

import numpy as np

from ..config import EMPTY_SYMBOL
from ..types import Color
from .board import Board


def color_solved(board: Board, color: Color) -> bool:
    """
    color の線がすべての通過マスを通ったかどうかを判定します。

    記号グリッドのコピーを作り、color の辺の両端のマスを空きマスにしていきます。
    最後に color の通過マスが 1 つも残っていなければ完成です。
    """
    remaining = board.symbols.copy()
    for (x1, y1), (x2, y2) in board.edges_of(color):
        remaining[y1, x1] = EMPTY_SYMBOL
        remaining[y2, x2] = EMPTY_SYMBOL

    return not np.any(remaining == color.segment)


def white_solved(board: Board) -> bool:
    """
    すべての白マスに、ちょうど数字の本数だけ辺が入っているかを判定します。
    """
    whites = np.char.isdigit(board.symbols)
    if not whites.any():
        return True

    capacities = board.symbols[whites].astype(np.int32)
    return bool(np.array_equal(board.counts[whites], capacities))
