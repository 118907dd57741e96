# -*- coding: utf-8 -*-
"""
wordcover 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 単語リストの場所
- ビットマスクの幅（扱える検索キー数の上限）
- 探索ノード数の上限
- 進捗ログの間隔
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Optional, Tuple

# ==== 単語リスト関連 =======================================================

# CLI / API で単語リストが指定されなかったときに使うパス
# 1行1単語のテキスト、または 'word' 列を持つ CSV
DEFAULT_WORDLIST_PATH: str = "/usr/share/dict/words"

# これより短い語はローダーで除外する（1文字語は除外）
MIN_WORD_LENGTH: int = 2

# 所有格（"'s" で終わる語）はローダーで除外する
POSSESSIVE_SUFFIX: str = "'s"

# ==== ビットマスク関連 =====================================================

# 検索キー1つにつき1ビットを使う。
# 32 なら numpy.uint32、64 なら numpy.uint64 相当の幅。
DEFAULT_MASK_BITS: int = 64
SUPPORTED_MASK_BITS: Tuple[int, ...] = (32, 64)

# ==== 探索関連 =============================================================

# 貪欲法の解を分枝限定法の初期上界として使うかどうか。
USE_GREEDY_BOUND: bool = True

# 分枝限定法で何ノードまで探索するかの上限。
# None なら無制限（最後まで探索して最適解を保証する）。
MAX_SEARCH_NODES: Optional[int] = None

# 何ノードごとに進捗ログを出すか。
SEARCH_LOG_INTERVAL: int = 100000
