# -*- coding: utf-8 -*-
"""
読み込んだ盤面が探索にかけられる形かどうかを確かめるモジュールです。

各色の端点は「0 個（その色は使わない）」か「2 個」でなければなりません。
"""

from __future__ import annotations

from typing import Dict

import numpy as np
import pandas as pd

from ..errors import EndpointCountError
from ..types import COLOR_ORDER, Color


def count_endpoints(grid: np.ndarray) -> Dict[Color, int]:
    """色ごとの端点の個数を数えます。"""
    counts = pd.Series(grid.ravel()).value_counts()
    return {color: int(counts.get(color.endpoint, 0)) for color in COLOR_ORDER}


def validate_endpoints(grid: np.ndarray) -> None:
    """
    端点の個数が 0 でも 2 でもない色があれば EndpointCountError を投げます。
    """
    for color, count in count_endpoints(grid).items():
        if count not in (0, 2):
            raise EndpointCountError(color, count)
