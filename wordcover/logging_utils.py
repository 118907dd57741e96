# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

wordcover の各モジュールは get_logger() で同じロガーを取得し、
「どの段階まで進んだか」「語彙や表の大きさ」「探索ノード数」などを記録します。
"""

from __future__ import annotations

import logging

# wordcover パッケージ共通で使うロガー名
LOGGER_NAME = "wordcover"


def get_logger() -> logging.Logger:
    """
    wordcover 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に INFO レベルのログを表示するように設定します。
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
        logger.setLevel(logging.INFO)

    return logger
