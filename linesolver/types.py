# -*- coding: utf-8 -*-
"""
linesolver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass / Enum を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid.directions import Direction

# グリッド上の座標を表す型 (x, y)
# x は右方向、y は下方向に増えます。
Position = Tuple[int, int]


class Color(Enum):
    """
    線の色です。探索はこの定義順（Red → Green → Blue）で行います。
    """

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    @property
    def segment(self) -> str:
        """通過マスの記号（"r" など）"""
        return self.value[0].lower()

    @property
    def endpoint(self) -> str:
        """端点の記号（"R" など）"""
        return self.value[0]

    @property
    def code(self) -> int:
        """辺テーブルに書き込む番号。0 は「辺なし」に予約しています。"""
        return COLOR_ORDER.index(self) + 1

    @classmethod
    def from_code(cls, code: int) -> "Color":
        return COLOR_ORDER[code - 1]

    def next(self) -> Optional["Color"]:
        """次に解く色を返します。最後の色なら None。"""
        idx = COLOR_ORDER.index(self)
        if idx + 1 < len(COLOR_ORDER):
            return COLOR_ORDER[idx + 1]
        return None

    def __str__(self) -> str:
        return self.value


COLOR_ORDER: Tuple[Color, ...] = (Color.RED, Color.GREEN, Color.BLUE)


@dataclass(frozen=True)
class Edge:
    """
    盤面に置いた 1 本の辺を表すクラスです。

    Attributes
    ----------
    position : (x, y)
        辺を伸ばし始めたマス。
    direction : Direction
        伸ばした方向（8方向のどれか）。
    color : Color
        この辺の色。
    """

    position: Position
    direction: "Direction"
    color: Color


@dataclass
class SolveResult:
    """
    1回の求解の結果をまとめたクラスです。

    Attributes
    ----------
    solved : bool
        解が見つかったかどうか。
    edges : list of Edge
        置いた辺（置いた順）。解けなかった場合は空。
    shape : (height, width)
        盤面の大きさ。
    nodes_visited : int
        depth_first_search を呼んだ回数。
    backtracks : int
        辺を取り消した回数。
    """

    solved: bool
    edges: List[Edge]
    shape: Tuple[int, int]
    nodes_visited: int = 0
    backtracks: int = 0
