# wordcover/eval/coverage.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple


def join_terms(terms: Sequence[str], separator: str = "") -> str:
    return separator.join(terms)


def missing_keys(
    terms: Sequence[str],
    search_keys: Sequence[str],
    separator: str = "",
) -> List[str]:
    """
    単語を連結した文字列に含まれていない検索キーを返す。

    探索側のビットマスクとは独立に、文字列として検証する。
    境界をまたぐキーを認めるには separator="" にすること。
    """
    text = join_terms(terms, separator)
    return [k for k in search_keys if k not in text]


def verify_cover(
    terms: Sequence[str],
    search_keys: Sequence[str],
    separator: str = "",
) -> bool:
    return not missing_keys(terms, search_keys, separator)


def _word_offsets(terms: Sequence[str]) -> List[Tuple[int, int]]:
    offsets: List[Tuple[int, int]] = []
    pos = 0
    for w in terms:
        offsets.append((pos, pos + len(w)))
        pos += len(w)
    return offsets


def find_key_occurrences(
    terms: Sequence[str],
    search_keys: Sequence[str],
) -> Dict[str, Optional[Dict[str, object]]]:
    """
    各検索キーの最初の出現位置と、その出現がまたがる単語の番号を返す。

    Returns
    -------
    dict[key, dict | None]
        {"start": int, "end": int, "words": list[int], "spans_boundary": bool}。
        見つからないキーは None。
    """
    text = join_terms(terms)
    offsets = _word_offsets(terms)

    result: Dict[str, Optional[Dict[str, object]]] = {}
    for key in search_keys:
        start = text.find(key)
        if start < 0:
            result[key] = None
            continue
        end = start + len(key)
        words = [i for i, (s, e) in enumerate(offsets) if s < end and start < e]
        result[key] = {
            "start": start,
            "end": end,
            "words": words,
            "spans_boundary": len(words) > 1,
        }
    return result
