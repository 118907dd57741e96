# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..types import CoverResult
from ..eval.coverage import find_key_occurrences, join_terms


def build_key_list(result: CoverResult) -> List[Dict[str, Any]]:
    """
    検索キーごとの出現位置の一覧を作る
    """
    occurrences = find_key_occurrences(result.terms, result.search_keys)

    items: List[Dict[str, Any]] = []
    for bit, key in enumerate(result.search_keys):
        occ = occurrences[key]
        item: Dict[str, Any] = {"key": key, "bit": bit, "found": occ is not None}
        if occ is not None:
            item.update(occ)
        items.append(item)
    return items


def build_result(result: CoverResult) -> Dict[str, Any]:
    """
    CoverResult から、JSON にそのまま変換できる辞書を作ります。

    Parameters
    ----------
    result : CoverResult
        find_minimum_cover() の戻り値。

    Returns
    -------
    dict
        - "terms"         : 単語の並び
        - "text"          : 単語を区切りなしで連結した文字列
        - "total_cost"    : 文字数の合計（被覆できなければ None）
        - "word_count"    : 単語数
        - "covered"       : 被覆できたかどうか
        - "greedy_cost"   : 初期上界に使った貪欲解の文字数
        - "nodes_visited" : 探索ノード数
        - "vocabulary_size" : 絞り込み後の語彙数
        - "complete"      : 最後まで探索したか
        - "keys"          : 検索キーごとの出現位置
    """
    return {
        "terms": list(result.terms),
        "text": join_terms(result.terms),
        "total_cost": result.total_cost,
        "word_count": len(result.terms),
        "covered": result.covered,
        "greedy_cost": result.greedy_cost,
        "nodes_visited": result.nodes_visited,
        "vocabulary_size": result.vocabulary_size,
        "complete": result.complete,
        "keys": build_key_list(result),
    }


def format_result(result: CoverResult) -> str:
    """CLI 向けの人が読む形式の文字列を作ります。"""
    if not result.covered:
        return "No cover found for: " + ", ".join(result.search_keys)

    lines = [
        " ".join(result.terms),
        f"cost={result.total_cost} words={len(result.terms)} "
        f"greedy={result.greedy_cost} nodes={result.nodes_visited} "
        f"vocab={result.vocabulary_size}"
        + ("" if result.complete else " (search stopped early)"),
    ]
    for item in build_key_list(result):
        if item.get("spans_boundary"):
            words = [result.terms[i] for i in item["words"]]
            lines.append(f"  {item['key']}: across {' + '.join(words)}")
    return "\n".join(lines)
