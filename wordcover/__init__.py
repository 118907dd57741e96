# wordcover/__init__.py
# -*- coding: utf-8 -*-
"""
wordcover パッケージの入口となるモジュールです。

    from wordcover import find_minimum_cover

    terms, cost = find_minimum_cover(["lon", "ion"], vocabulary)

と呼び出されることを想定しています。

ここでは、検索キーと語彙を受け取り、
1. 検索キーの正規化とビット幅の検査
2. 語彙の絞り込み
3. 検索キーごとの継続表の構築
4. 貪欲法による初期上界の計算
5. 分枝限定法による探索
を順番に呼び出し、すべてのキーを部分文字列として含む
最短の単語の並びを返します。
"""

from __future__ import annotations

from typing import Iterable, Optional

from .config import DEFAULT_MASK_BITS, MAX_SEARCH_NODES, USE_GREEDY_BOUND
from .errors import EmptySearchKeys, TooManySearchKeys, WordCoverError
from .logging_utils import get_logger
from .types import CoverResult
from .dictionary.vocabulary import filter_vocabulary, normalize_search_keys
from .dictionary.indexer import build_continuation_tables
from .cover.bitmask import check_capacity
from .cover.greedy import greedy_cover
from .cover.search import branch_and_bound_search

__all__ = [
    "CoverResult",
    "EmptySearchKeys",
    "TooManySearchKeys",
    "WordCoverError",
    "find_minimum_cover",
]

logger = get_logger()


def find_minimum_cover(
    search_keys: Iterable[str],
    vocabulary: Iterable[str],
    mask_bits: int = DEFAULT_MASK_BITS,
    use_greedy_bound: bool = USE_GREEDY_BOUND,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
) -> CoverResult:
    """
    すべての検索キーを部分文字列として含む、最短の単語の並びを求めます。

    Parameters
    ----------
    search_keys : iterable of str
        検索キー。正規化後の順序がビット番号になります。
    vocabulary : iterable of str
        語彙（小文字、所有格と1文字語は除去済みの想定）。
    mask_bits : int
        ビットマスクの幅（32 または 64）。
    use_greedy_bound : bool
        貪欲解を初期上界に使うかどうか。
    max_nodes : int or None
        探索ノード数の上限。None なら最後まで探索します。

    Returns
    -------
    CoverResult
        ``(terms, total_cost)`` として展開できる結果。
        被覆できない場合は terms が空、total_cost が None になります。

    Raises
    ------
    TooManySearchKeys
        検索キー数がビットマスクの幅を超える場合（インデックス構築前に検査）。
    """
    logger.info("=== find_minimum_cover() START ===")

    # 1) 検索キーの正規化と容量の検査
    keys = normalize_search_keys(search_keys)
    check_capacity(keys, mask_bits)
    logger.info("Search keys: %d (mask width %d).", len(keys), mask_bits)

    if not keys:
        logger.info("No search keys; returning the empty cover.")
        return CoverResult(terms=(), total_cost=0)

    # 2) 語彙の絞り込み
    words = filter_vocabulary(vocabulary, keys)

    # 3) 継続表の構築
    tables = build_continuation_tables(keys, words)

    # 4) 貪欲解（初期上界）
    greedy = greedy_cover(tables)
    initial = greedy if use_greedy_bound else None

    # 5) 分枝限定法
    best, stats = branch_and_bound_search(tables, initial=initial, max_nodes=max_nodes)

    if best is None:
        logger.warning("No cover exists for the given keys and vocabulary.")
        result = CoverResult(
            terms=(),
            total_cost=None,
            search_keys=tuple(keys),
            greedy_cost=None,
            nodes_visited=stats.nodes_visited,
            complete=stats.complete,
            vocabulary_size=len(words),
        )
    else:
        result = CoverResult(
            terms=tuple(best.terms),
            total_cost=best.cost,
            search_keys=tuple(keys),
            greedy_cost=greedy.cost if greedy is not None else None,
            nodes_visited=stats.nodes_visited,
            complete=stats.complete,
            vocabulary_size=len(words),
        )

    logger.info("Result: %s (cost=%s)", " ".join(result.terms), result.total_cost)
    logger.info("=== find_minimum_cover() END ===")
    return result
