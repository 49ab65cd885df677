# -*- coding: utf-8 -*-
"""
8方向の定義と、辺の「正規化された保存場所」を計算するモジュールです。

辺は 2 つのマスで共有されるので、どちらのマスから見ても
同じ場所に 1 回だけ記録したい。そこで

- Right / DownRight / Down / DownLeft の 4 方向を「内側方向」とし、
  辺を伸ばし始めたマスにそのまま記録する
- 残りの Left / UpLeft / Up / UpRight は、隣のマスから見た
  反対向きの内側方向として記録する

という形にしています。これで 1 マスあたり 4 スロットで足ります。
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from ..types import Position

# 内側方向のスロット番号
INNER_RIGHT = 0
INNER_DOWN_RIGHT = 1
INNER_DOWN = 2
INNER_DOWN_LEFT = 3

# 1 マスあたりのスロット数
INNER_SLOTS = 4


class Direction(Enum):
    """
    8方向。値は (dx, dy) のオフセットです。

    定義順がそのまま探索で方向を試す順番になります。
    前半 4 つが内側方向、後半 4 つはそれぞれの逆向きです。
    """

    RIGHT = (1, 0)
    DOWN_RIGHT = (1, 1)
    DOWN = (0, 1)
    DOWN_LEFT = (-1, 1)
    LEFT = (-1, 0)
    UP_LEFT = (-1, -1)
    UP = (0, -1)
    UP_RIGHT = (1, -1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    @property
    def label(self) -> str:
        """出力用の名前（"DownRight" など）"""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.value
        return dx != 0 and dy != 0

    def to_inner(self) -> Tuple[int, bool]:
        """
        (内側方向のスロット番号, 逆向きかどうか) を返します。

        例: Up → (INNER_DOWN, True)
        """
        idx = _DIRECTION_ORDER.index(self)
        if idx < INNER_SLOTS:
            return idx, False
        return idx - INNER_SLOTS, True

    def step(self, position: Position) -> Position:
        """position からこの方向に 1 マス進んだ座標"""
        dx, dy = self.value
        return position[0] + dx, position[1] + dy

    def store(self, position: Position) -> Tuple[int, int, int]:
        """
        position からこの方向に伸ばした辺を記録する (x, y, スロット番号)。

        逆向きの方向なら、隣のマスの内側方向スロットになります。
        """
        inner, reverse = self.to_inner()
        x, y = self.step(position) if reverse else position
        return x, y, inner

    def rival(self, position: Position) -> Optional[Tuple[int, int, int]]:
        """
        同じ単位正方形のもう一方の対角線が記録されるスロットを返します。

        斜めの辺同士は交差できないので、ここが埋まっていたら
        この方向には辺を置けません。縦横方向なら None。
        """
        x, y = position
        if self is Direction.UP_RIGHT:
            return x, y - 1, INNER_DOWN_RIGHT
        if self is Direction.UP_LEFT:
            return x, y - 1, INNER_DOWN_LEFT
        if self is Direction.DOWN_RIGHT:
            return x + 1, y, INNER_DOWN_LEFT
        if self is Direction.DOWN_LEFT:
            return x - 1, y, INNER_DOWN_RIGHT
        return None

    @classmethod
    def from_inner(cls, inner: int) -> "Direction":
        return _DIRECTION_ORDER[inner]

    def __str__(self) -> str:
        return self.label


_DIRECTION_ORDER: Tuple[Direction, ...] = tuple(Direction)

# 探索で方向を試す順番
SEARCH_ORDER: Tuple[Direction, ...] = _DIRECTION_ORDER
