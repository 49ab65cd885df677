# -*- coding: utf-8 -*-
"""
linesolver 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- ログの出力レベル
- 探索トレースログの出力先
- 探索の進捗ログを出す間隔
- 再帰の深さ上限の見積もり
などを簡単に変更できます。

※ 探索のコア（Board / 探索関数）自体は設定値を持ちません。
  ここにあるのはログや入出力など、周辺部分のための値です。
"""

from __future__ import annotations

import os

# ==== ログ関連 =============================================================

# linesolver ロガーのレベル（"DEBUG", "INFO", "WARNING" など）
LOG_LEVEL: str = os.getenv("LINESOLVER_LOG_LEVEL", "INFO")

# 探索トレース（add_edge / remove_edge 1回ごとのログ）を出すかどうか。
# 非常に大量に出力されるので、デバッグ時以外は False のままにします。
SEARCH_TRACE_ENABLED: bool = os.getenv("LINESOLVER_SEARCH_TRACE", "0") == "1"

# トレースログの保存場所
SEARCH_TRACE_LOG_DIR: str = "logs"
SEARCH_TRACE_LOG_FILE: str = "search_trace.log"

# ==== 探索関連 =============================================================

# 何ノード訪問するごとに進捗ログを出すか
SEARCH_PROGRESS_INTERVAL: int = 100000

# 1マスあたりに見込む再帰の深さ。
# 白マス（数字マス）は最大 4 回まで経路が入ってくるので 4 を掛けておく。
RECURSION_DEPTH_PER_CELL: int = 4

# 上の見積もりに加える余裕分
RECURSION_HEADROOM: int = 1000

# ==== 盤面の記号 ===========================================================

# 入力で使える記号
#   r/g/b : 各色の通過マス
#   R/G/B : 各色の端点
#   .     : 空きマス
#   1〜4  : 白マス（ちょうどその本数の辺が入る必要がある）
VALID_SYMBOLS: str = "rgbRGB.1234"

# 空きマスの記号
EMPTY_SYMBOL: str = "."
