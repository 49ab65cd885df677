# -*- coding: utf-8 -*-
"""
盤面のセルを内部表現に正規化するモジュールです。

主な役割:
- テキスト（1行 = 1列分のマス）や pandas.DataFrame を numpy 配列に変換
- 各セルの値を「色マス」「端点」「空きマス」「白マス(1〜4)」の記号に正規化
- 記号を調べるための小さなヘルパー関数
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from ..config import EMPTY_SYMBOL, VALID_SYMBOLS
from ..errors import PuzzleFormatError
from ..types import Color


def is_white(symbol: str) -> bool:
    """白マス（数字マス）かどうか"""
    return symbol.isdigit()


def white_capacity(symbol: str) -> Optional[int]:
    """
    白マスなら、その数字（入ってよい辺の本数）を返します。
    白マスでなければ None。
    """
    if is_white(symbol):
        return int(symbol)
    return None


def is_color_cell(symbol: str, color: Color) -> bool:
    """color の通過マスまたは端点かどうか"""
    return symbol == color.segment or symbol == color.endpoint


def normalize_cell(x: Any, row: int = 0, column: int = 0) -> str:
    """
    個々のセルの値を、内部表現の 1 文字に変換します。

    変換ルール
    ----------
    - 前後の空白は取り除く
    - None は空きマス "." とみなす
    - "r" "g" "b" "R" "G" "B" "." "1"〜"4" はそのまま
    - 数値 (int) の 1〜4 は文字にする
    - それ以外は PuzzleFormatError
    """
    if x is None:
        return EMPTY_SYMBOL

    s = str(x).strip()
    if len(s) != 1 or s not in VALID_SYMBOLS:
        raise PuzzleFormatError(
            f"invalid symbol: {s!r} at row {row}, column {column}",
            row=row,
            column=column,
        )

    return s


def normalize_grid(df: pd.DataFrame) -> np.ndarray:
    """
    DataFrame から 2次元 numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ。1 セル 1 記号。

    Returns
    -------
    numpy.ndarray
        shape = (height, width) の 1 文字配列（dtype "<U1"）。
    """
    rows, cols = df.shape
    if rows == 0 or cols == 0:
        raise PuzzleFormatError("no input")

    grid = np.empty((rows, cols), dtype="<U1")

    for i in range(rows):
        for j in range(cols):
            grid[i, j] = normalize_cell(df.iat[i, j], row=i, column=j)

    return grid


def split_lines(text: Union[str, Iterable[str]]) -> List[str]:
    """
    入力を行のリストにします。

    末尾の空行は読み飛ばします（ファイル末尾の改行など）。
    途中の空行は残すので、後の幅チェックでエラーになります。
    """
    if isinstance(text, str):
        lines = text.splitlines()
    else:
        lines = [line.rstrip("\r\n") for line in text]

    while lines and not lines[-1].strip():
        lines.pop()

    return lines


def lines_to_frame(lines: List[str]) -> pd.DataFrame:
    """
    行のリストを 1 マス 1 列の DataFrame にします。

    幅は 1 行目の長さで、ほかの行の長さが違えば PuzzleFormatError。
    """
    if not lines:
        raise PuzzleFormatError("no input")

    width = len(lines[0])
    if width == 0:
        raise PuzzleFormatError("no input")

    for i, line in enumerate(lines):
        if len(line) != width:
            raise PuzzleFormatError(
                f"line {i} has length {len(line)}, "
                f"but the first line has length {width}",
                row=i,
            )

    return pd.DataFrame([list(line) for line in lines])


def parse_grid(text: Union[str, Iterable[str]]) -> np.ndarray:
    """
    テキストの盤面を読み込み、正規化済みの numpy 配列を返します。

    >>> parse_grid("RG\\nGR").shape
    (2, 2)
    """
    lines = split_lines(text)
    df = lines_to_frame(lines)
    return normalize_grid(df)


def grid_to_lines(grid: np.ndarray) -> List[str]:
    """正規化済みグリッドを行ごとの文字列に戻します（ログ表示用）"""
    return ["".join(row) for row in grid.tolist()]
