# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from ..types import Edge, SolveResult

EDGE_COLUMNS = ["color", "direction", "x", "y"]


def build_edge_table(edges: List[Edge]) -> pd.DataFrame:
    """
    辺のリストを 1 辺 1 行の DataFrame にします。

    行の順番は置いた順のままです。
    """
    rows = [
        {
            "color": str(edge.color),
            "direction": edge.direction.label,
            "x": edge.position[0],
            "y": edge.position[1],
        }
        for edge in edges
    ]
    return pd.DataFrame(rows, columns=EDGE_COLUMNS)


def build_paths(edges: List[Edge]) -> Dict[str, List[Dict[str, Any]]]:
    """
    色ごとに辺をまとめます。色は解いた順、辺は置いた順です。
    """
    table = build_edge_table(edges)
    paths: Dict[str, List[Dict[str, Any]]] = {}

    for color, group in table.groupby("color", sort=False):
        paths[str(color)] = [
            {
                "direction": row.direction,
                "x": int(row.x),
                "y": int(row.y),
            }
            for row in group.itertuples(index=False)
        ]

    return paths


def format_solution(edges: List[Edge]) -> List[str]:
    """
    表示用のテキスト行を作ります。

    例::

        Red:
        Right 0 0
        Green:
        Right 0 1
    """
    lines: List[str] = []
    for color, steps in build_paths(edges).items():
        lines.append(f"{color}:")
        for step in steps:
            lines.append(f"{step['direction']} {step['x']} {step['y']}")
    return lines


def build_result(result: SolveResult) -> Dict[str, Any]:
    """
    API などで返すための辞書を作ります（DataFrame は含めない）。
    """
    height, width = result.shape
    return {
        "solved": result.solved,
        "shape": (height, width),
        "paths": build_paths(result.edges) if result.solved else {},
        "edge_count": len(result.edges),
        "stats": {
            "nodes_visited": result.nodes_visited,
            "backtracks": result.backtracks,
        },
    }
