# -*- coding: utf-8 -*-
"""
盤面の読み込み時に使う例外をまとめたモジュールです。

どれも探索を始める前の読み込み処理で投げられます。
探索そのものは例外を投げません。置けない辺は add_edge が False を返すだけで、
解けない盤面は SolveResult.solved が False になります。
"""

from __future__ import annotations

from typing import Any


class PuzzleInputError(ValueError):
    """
    盤面の読み込みで見つかった問題の基底クラスです。
    """


class PuzzleFormatError(PuzzleInputError):
    """
    空の入力・行の長さの不一致・知らない記号のときに投げます。
    """

    def __init__(
        self,
        message: str,
        *,
        row: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class EndpointCountError(PuzzleInputError):
    """
    ある色の端点の数が 0 でも 2 でもないときに投げます。
    """

    def __init__(self, color: Any, count: int) -> None:
        letter = color.endpoint
        super().__init__(
            f"There are {count} {letter} endpoints, but there should be 0 or 2"
        )
        self.color = color
        self.count = count
