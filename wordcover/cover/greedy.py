# -*- coding: utf-8 -*-
"""
貪欲法で近似的な被覆を求めるモジュールです。

まだ被覆されていない検索キーを番号順に見て、
そのキーを含む最も短い単語を1つずつ並べます。
並べた単語が偶然ほかのキーも含んでいれば、そのキーも被覆済みになります。

得られた解は最適とは限りませんが、分枝限定法の初期上界として使います。
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..types import BestResult, ContinuationTable
from ..cover.bitmask import full_mask
from ..logging_utils import get_logger

logger = get_logger()


def greedy_cover(tables: Sequence[ContinuationTable]) -> Optional[BestResult]:
    """
    各検索キーについて最短の完全一致語を選ぶ貪欲解を返します。

    Parameters
    ----------
    tables : sequence of ContinuationTable
        build_continuation_tables() の結果（キー番号順）。

    Returns
    -------
    BestResult or None
        貪欲解。完全一致語が1つもないキーがある場合は None。
    """
    remaining = full_mask(len(tables))
    terms: List[str] = []
    cost = 0

    for table in tables:
        if not remaining & (1 << table.index):
            continue

        candidates = table.full_match.candidates
        if not candidates:
            logger.info("Greedy: no single word contains %r; no initial bound.", table.key)
            return None

        # 長さの昇順に並んでいるので先頭が最短
        best = candidates[0]
        terms.append(best.word)
        cost += best.cost
        remaining &= ~best.cover_bits

    logger.info("Greedy cover: %d words, cost=%d.", len(terms), cost)
    return BestResult(terms=terms, cost=cost)
