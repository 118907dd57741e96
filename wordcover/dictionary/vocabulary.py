# -*- coding: utf-8 -*-
"""
検索キーの正規化と、語彙の絞り込みを行うモジュールです。

語彙のうち、どの被覆にも現れ得ない単語を事前に取り除きます。
単語を残す条件は次のいずれかです：
- ある検索キー全体を部分文字列として含む
- ある検索キーの「空でない真の前半」で終わる
  （境界をまたぐ2語の1語目になり得る）
- ある検索キーの「空でない真の後半」で始まる
  （境界をまたぐ2語の2語目になり得る）
"""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

import pandas as pd

from ..logging_utils import get_logger

logger = get_logger()


def normalize_search_keys(search_keys: Iterable[str]) -> List[str]:
    """
    検索キーを小文字化・前後の空白除去し、空文字列と重複を除きます。

    最初に現れた順序を保ちます。戻り値の位置がそのままビット番号になります。
    """
    keys: List[str] = []
    seen: Set[str] = set()
    for raw in search_keys:
        key = str(raw).strip().lower()
        if not key:
            logger.warning("Ignoring empty search key.")
            continue
        if key in seen:
            logger.warning("Ignoring duplicate search key %r.", key)
            continue
        seen.add(key)
        keys.append(key)
    return keys


def boundary_fragments(search_keys: Iterable[str]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    全検索キーの「真の前半」と「真の後半」を列挙します。

    Returns
    -------
    prefixes : tuple of str
        k[:i]（1 <= i < len(k)）の集合。
    suffixes : tuple of str
        k[i:]（1 <= i < len(k)）の集合。
    """
    prefixes: Set[str] = set()
    suffixes: Set[str] = set()
    for key in search_keys:
        for i in range(1, len(key)):
            prefixes.add(key[:i])
            suffixes.add(key[i:])
    return tuple(sorted(prefixes)), tuple(sorted(suffixes))


def filter_vocabulary(vocabulary: Iterable[str], search_keys: Iterable[str]) -> Set[str]:
    """
    被覆に参加し得る単語だけを残した語彙を返します。

    Parameters
    ----------
    vocabulary : iterable of str
        生の語彙。重複があってもよい。
    search_keys : iterable of str
        検索キー。

    Returns
    -------
    set of str
        絞り込み後の語彙（重複なし）。同じ検索キーで再度絞り込んでも変わりません。
    """
    keys = [k for k in search_keys if k]
    words = pd.Series(sorted({str(w) for w in vocabulary}), dtype=object)
    if words.empty or not keys:
        return set()

    keep = pd.Series(False, index=words.index)
    for key in keys:
        keep |= words.str.contains(key, regex=False).astype(bool)

    prefixes, suffixes = boundary_fragments(keys)
    if prefixes:
        keep |= words.map(lambda w: w.endswith(prefixes)).astype(bool)
    if suffixes:
        keep |= words.map(lambda w: w.startswith(suffixes)).astype(bool)

    filtered = set(words[keep])
    logger.info("Vocabulary filtered: %d -> %d words.", len(words), len(filtered))
    return filtered
