# -*- coding: utf-8 -*-
"""
探索中の盤面の状態を持つモジュールです。

Board が持つもの
----------------
- symbols : 各マスの記号（読み込み後は変更しない）
- counts  : 各マスに入ってきた辺の本数
- sides   : 各マス 4 スロットの辺テーブル（0 = 辺なし, それ以外 = 色番号）
- result  : 置いた辺のログ。取り消し用のスタックも兼ねる

add_edge は置けない辺なら何も変更せずに False を返します。
remove_edge は直前の add_edge を 1 回分だけ取り消します（LIFO）。
探索側はこの 2 つの組み合わせだけで状態を進めたり戻したりします。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..grid.directions import INNER_SLOTS, Direction
from ..grid.parser import is_color_cell, is_white, white_capacity
from ..types import Color, Edge, Position


@dataclass(eq=False)
class BoardState:
    """
    盤面の可変部分のコピーです。テストやデバッグで
    「操作の前後で状態が同じか」を比べるために使います。
    """

    counts: np.ndarray
    sides: np.ndarray
    result: Tuple[Edge, ...]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            np.array_equal(self.counts, other.counts)
            and np.array_equal(self.sides, other.sides)
            and self.result == other.result
        )


class Board:
    """
    盤面の記号・接続数・辺テーブル・辺ログをまとめて管理するクラスです。

    配列はすべて [y, x] の順で添字を付けます。
    外から渡す座標 position は (x, y) です。
    """

    def __init__(
        self,
        symbols: np.ndarray,
        trace_logger: Optional[logging.Logger] = None,
    ) -> None:
        self.symbols = symbols
        self.height, self.width = symbols.shape
        self.counts = np.zeros((self.height, self.width), dtype=np.int32)
        self.sides = np.zeros((self.height, self.width, INNER_SLOTS), dtype=np.int8)
        self.result: List[Edge] = []
        self.trace = trace_logger

    @classmethod
    def from_grid(
        cls,
        symbols: np.ndarray,
        trace_logger: Optional[logging.Logger] = None,
    ) -> "Board":
        return cls(np.array(symbols, dtype="<U1"), trace_logger=trace_logger)

    # ------------------------------------------------------------------
    # 参照系
    # ------------------------------------------------------------------
    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def symbol_at(self, position: Position) -> str:
        x, y = position
        return str(self.symbols[y, x])

    def count_at(self, position: Position) -> int:
        x, y = position
        return int(self.counts[y, x])

    def side_color(self, position: Position, inner: int) -> Optional[Color]:
        """position のスロット inner に記録されている色（なければ None）"""
        x, y = position
        code = int(self.sides[y, x, inner])
        return Color.from_code(code) if code else None

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """置いた順の辺ログ（読み取り専用）"""
        return tuple(self.result)

    def find_endpoint(self, color: Color) -> Optional[Position]:
        """
        行優先（左上から右へ、次の行へ）で最初に見つかる color の端点。
        """
        hits = np.flatnonzero(self.symbols.ravel() == color.endpoint)
        if hits.size == 0:
            return None
        idx = int(hits[0])
        return idx % self.width, idx // self.width

    def edges_of(self, color: Color) -> Iterator[Tuple[Position, Position]]:
        """
        辺テーブル上の color の辺を (片方のマス, もう片方のマス) で列挙します。
        """
        for y, x, inner in np.argwhere(self.sides == color.code):
            position = (int(x), int(y))
            yield position, Direction.from_inner(int(inner)).step(position)

    def snapshot(self) -> BoardState:
        return BoardState(
            counts=self.counts.copy(),
            sides=self.sides.copy(),
            result=tuple(self.result),
        )

    def describe(self) -> List[str]:
        """デバッグ表示用: 各マスを「記号+接続数」で並べた行"""
        return [
            " ".join(
                f"{self.symbols[y, x]}{self.counts[y, x]}" for x in range(self.width)
            )
            for y in range(self.height)
        ]

    # ------------------------------------------------------------------
    # 変更系
    # ------------------------------------------------------------------
    def mark_start(self, position: Position) -> None:
        """探索の始点の端点に「入ってきた辺」を 1 本分数えておく"""
        x, y = position
        self.counts[y, x] += 1

    def unmark_start(self, position: Position) -> None:
        x, y = position
        self.counts[y, x] -= 1

    def add_edge(self, position: Position, direction: Direction, color: Color) -> bool:
        """
        position から direction に color の辺を置きます。

        置けない場合は何も変更せずに False を返します。
        判定は以下の順で行います。

        1. 隣のマスが盤面の中にあるか
        2. 斜めの辺なら、同じ正方形のもう一方の対角線が埋まっていないか
        3. 隣のマスが受け入れられるか
           - 白マス: 入っている本数が数字未満
           - 同じ色の通過マス・端点: まだ 1 本も入っていない
        4. 辺を記録するマスが同じ色のマスか白マスか
        5. 記録するスロットが空いているか
        """
        if self.trace is not None:
            self.trace.debug(
                "try add side (%d, %d, %s, %s)",
                position[0], position[1], direction.label, color,
            )

        nx, ny = direction.step(position)
        if not self.in_bounds((nx, ny)):
            # 盤面の外
            return False

        if direction.is_diagonal:
            rx, ry, rinner = direction.rival(position)
            if self.sides[ry, rx, rinner]:
                # もう一方の斜めの辺と交差する
                return False

        neighbor = str(self.symbols[ny, nx])
        capacity = white_capacity(neighbor)
        if capacity is not None:
            if self.counts[ny, nx] + 1 > capacity:
                # 白マスの本数が上限に達している
                return False
        elif is_color_cell(neighbor, color):
            if self.counts[ny, nx] > 0:
                # すでに接続済み
                return False
        else:
            # 色が違う
            return False

        sx, sy, inner = direction.store(position)
        stored = str(self.symbols[sy, sx])
        if not (is_color_cell(stored, color) or is_white(stored)):
            return False

        if self.sides[sy, sx, inner]:
            # 同じ辺がすでにある
            return False

        self.sides[sy, sx, inner] = color.code
        self.counts[ny, nx] += 1
        self.result.append(Edge(position=position, direction=direction, color=color))
        return True

    def remove_edge(self, position: Position, direction: Direction) -> bool:
        """
        直前に置いた (position, direction) の辺を取り消します。

        スロットが空だった場合は呼び出し側の使い方の誤りなので False を返します。
        このとき、先に減らした接続数は戻しません。
        """
        if self.trace is not None:
            self.trace.debug(
                "remove side (%d, %d, %s)", position[0], position[1], direction.label
            )

        nx, ny = direction.step(position)
        self.counts[ny, nx] -= 1

        sx, sy, inner = direction.store(position)
        if not self.sides[sy, sx, inner]:
            return False

        self.sides[sy, sx, inner] = 0
        self.result.pop()
        return True
