# -*- coding: utf-8 -*-
"""
wordcover で送出する例外クラスをまとめたモジュールです。

どちらも探索を始める前（インデックス構築前）に一度だけ検査されます。
探索の途中でこれらが発生することはありません。
"""

from __future__ import annotations


class WordCoverError(Exception):
    """wordcover 固有の例外の基底クラス。"""


class TooManySearchKeys(WordCoverError, ValueError):
    """
    検索キーの数がビットマスクの幅（32 または 64）を超えたときの例外。

    Attributes
    ----------
    count : int
        正規化後の検索キー数。
    capacity : int
        ビットマスクの幅（= 扱える検索キー数の上限）。
    """

    def __init__(self, count: int, capacity: int) -> None:
        self.count = count
        self.capacity = capacity
        super().__init__(
            f"{count} search keys do not fit in a {capacity}-bit cover mask"
        )


class EmptySearchKeys(WordCoverError, ValueError):
    """検索キーが1つもないときの例外。"""

    def __init__(self) -> None:
        super().__init__("at least one non-empty search key is required")
