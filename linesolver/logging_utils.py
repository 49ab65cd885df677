# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 探索がどの色まで進んだか、どこでバックトラックしたかを
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
import os

from .config import (
    LOG_LEVEL, SEARCH_TRACE_LOG_DIR, SEARCH_TRACE_LOG_FILE,
)

# linesolver パッケージ共通で使うロガー名
LOGGER_NAME = "linesolver"

# add_edge / remove_edge のトレース専用ロガー名
TRACE_LOGGER_NAME = "linesolver.trace"


def get_logger() -> logging.Logger:
    """
    linesolver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力（コンソール）に LOG_LEVEL のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL.upper())

    return logger


def set_log_level(level: str) -> None:
    """CLI などから linesolver ロガーのレベルを変更します。"""
    get_logger().setLevel(level.upper())


def get_search_trace_logger() -> logging.Logger:
    """
    探索トレース用のファイルロガーを返します。

    1回の add_edge / remove_edge ごとに 1 行書き出すので、
    標準出力には流さずファイルにだけ保存します。
    """
    logger = logging.getLogger(TRACE_LOGGER_NAME)

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    os.makedirs(SEARCH_TRACE_LOG_DIR, exist_ok=True)
    log_file = os.path.join(SEARCH_TRACE_LOG_DIR, SEARCH_TRACE_LOG_FILE)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # 他ロガーへの伝播禁止（コンソールに出さない）
    logger.propagate = False

    return logger
