# -*- coding: utf-8 -*-
"""
検索キーごとの継続表（ContinuationTable）を作成するモジュールです。

検索キー k について、次のリストを作ります：
- 完全一致（前半 ""）: k を含む単語
- 分割点 k = prefix + suffix ごと: suffix で始まる単語
  （直前の単語が prefix で終わっていれば、境界をまたいで k が完成する）
  と、prefix で終わる単語（leads: 2語の組で置くときの1語目）

各リストは単語の長さの昇順（同じ長さなら辞書順）に並べます。
探索はこの並び順を前提に「これ以上長い語は見なくてよい」と打ち切るので、
並び順を崩してはいけません。

被覆ビットは、完全一致なら単語そのもの、分割点なら prefix + 単語 に対して
計算します。これにより、境界をまたいで他のキーを偶然含む場合も拾えます。
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from ..types import BoundaryEntry, CandidateWord, ContinuationTable
from ..cover.bitmask import encode_cover, iter_bits
from ..logging_utils import get_logger

logger = get_logger()


def build_vocabulary_frame(vocabulary: Iterable[str]) -> pd.DataFrame:
    """
    語彙を (長さ, 単語) の順に並べた DataFrame を作ります。

    Returns
    -------
    pandas.DataFrame
        'word', 'length' 列を持ち、長さの昇順に並んだ DataFrame。
    """
    df = pd.DataFrame({"word": sorted({str(w) for w in vocabulary})}, dtype=object)
    df["length"] = df["word"].str.len()
    df = df.sort_values(["length", "word"], kind="stable")
    return df.reset_index(drop=True)


def _candidates(
    words: Iterable[str],
    search_keys: Sequence[str],
    prefix: str,
    cache: Dict[str, int],
) -> Tuple[CandidateWord, ...]:
    out: List[CandidateWord] = []
    for w in words:
        text = prefix + w
        bits = cache.get(text)
        if bits is None:
            bits = cache[text] = encode_cover(text, search_keys)
        out.append(CandidateWord(w, bits))
    return tuple(out)


def build_continuation_tables(
    search_keys: Sequence[str],
    vocabulary: Iterable[str],
) -> List[ContinuationTable]:
    """
    検索キーごとに継続表を作成します。

    Parameters
    ----------
    search_keys : sequence of str
        正規化済みの検索キー。位置がビット番号になります。
    vocabulary : iterable of str
        filter_vocabulary() で絞り込んだ語彙。

    Returns
    -------
    list[ContinuationTable]
        search_keys と同じ順序の継続表。
        各表の entries[0] は完全一致のエントリ（候補が空でも必ず存在）。
        候補が1つもない分割点は省略します。
        分割点のエントリには、前半で終わる単語（leads）も持たせます。
    """
    df = build_vocabulary_frame(vocabulary)
    words = df["word"]
    cache: Dict[str, int] = {}

    tables: List[ContinuationTable] = []
    for index, key in enumerate(search_keys):
        full = words[words.str.contains(key, regex=False).astype(bool)]
        entries = [BoundaryEntry("", _candidates(full, search_keys, "", cache))]

        for i in range(1, len(key)):
            prefix, suffix = key[:i], key[i:]
            starts = words[words.str.startswith(suffix).astype(bool)]
            if starts.empty:
                continue
            ends = words[words.str.endswith(prefix).astype(bool)]
            entries.append(
                BoundaryEntry(
                    prefix,
                    _candidates(starts, search_keys, prefix, cache),
                    leads=_candidates(ends, search_keys, "", cache),
                )
            )

        table = ContinuationTable(key=key, index=index, entries=tuple(entries))
        tables.append(table)
        logger.debug(
            "Table %r: %d full matches, %d boundaries.",
            key,
            len(table.full_match.candidates),
            len(entries) - 1,
        )

    logger.info(
        "Built %d continuation tables (%d candidate entries).",
        len(tables),
        sum(len(e.candidates) for t in tables for e in t.entries),
    )
    return tables


@dataclass
class JunctionIndex:
    """
    隣り合う2語の境目をまたいで完成する検索キーを求めるためのインデックスです。

    分割点 j（キー k を k[:i] + k[i:] に分ける位置）ごとに1ビットを割り当て、
    単語ごとに「どの分割点の前半で終わるか」「どの分割点の後半で始まるか」を
    ビット集合で持ちます。2語の境目でまたがるキーは、
    ends[前の単語] & starts[次の単語] に立っている分割点のキーです。
    """

    split_keys: List[int] = field(default_factory=list)
    ends: Dict[str, int] = field(default_factory=dict)
    starts: Dict[str, int] = field(default_factory=dict)

    def spanning_bits(self, previous_word: str, word: str) -> int:
        """previous_word + word の境目をまたいで完成するキーのビット集合を返します。"""
        shared = self.ends.get(previous_word, 0) & self.starts.get(word, 0)
        if not shared:
            return 0
        bits = 0
        for j in iter_bits(shared):
            bits |= 1 << self.split_keys[j]
        return bits


def build_junction_index(
    search_keys: Sequence[str],
    vocabulary: Iterable[str],
) -> JunctionIndex:
    """
    語彙の各単語について、分割点の前半・後半との一致をビット集合にまとめます。

    Parameters
    ----------
    search_keys : sequence of str
        正規化済みの検索キー。
    vocabulary : iterable of str
        探索で並べ得る単語。

    Returns
    -------
    JunctionIndex
    """
    index = JunctionIndex()
    prefix_splits: Dict[str, int] = {}
    suffix_splits: Dict[str, int] = {}
    for key_index, key in enumerate(search_keys):
        for i in range(1, len(key)):
            bit = 1 << len(index.split_keys)
            index.split_keys.append(key_index)
            prefix_splits[key[:i]] = prefix_splits.get(key[:i], 0) | bit
            suffix_splits[key[i:]] = suffix_splits.get(key[i:], 0) | bit

    longest = max((len(k) for k in search_keys), default=0)
    for w in set(vocabulary):
        ends = 0
        starts = 0
        for n in range(1, min(len(w), longest) + 1):
            ends |= prefix_splits.get(w[-n:], 0)
            starts |= suffix_splits.get(w[:n], 0)
        if ends:
            index.ends[w] = ends
        if starts:
            index.starts[w] = starts
    return index


def junction_index_from_tables(tables: Sequence[ContinuationTable]) -> JunctionIndex:
    """継続表に現れるすべての単語から JunctionIndex を作ります。"""
    words = {
        c.word
        for t in tables
        for e in t.entries
        for c in itertools.chain(e.candidates, e.leads)
    }
    return build_junction_index([t.key for t in tables], words)
