# -*- coding: utf-8 -*-
"""
wordcover で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class CandidateWord:
    """
    継続表の候補1件を表すクラスです。

    Attributes
    ----------
    word : str
        語彙中の単語。
    cover_bits : int
        この単語（部分一致の場合は「境界の前半 + 単語」）が
        完全に含む検索キーのビット集合。
    """

    word: str
    cover_bits: int

    @property
    def cost(self) -> int:
        """この単語を並べたときに増える文字数を返します。"""
        return len(self.word)


@dataclass(frozen=True)
class BoundaryEntry:
    """
    検索キー1つの「分割点」と、その後ろに続けられる候補語のリストです。

    Attributes
    ----------
    prefix : str
        直前の単語の末尾に必要な文字列。
        空文字列は「単語がキー全体を含む」（完全一致）を意味します。
    candidates : tuple of CandidateWord
        単語の長さの昇順に並んだ候補。
        探索の打ち切り判定はこの並び順に依存します。
    leads : tuple of CandidateWord
        prefix で終わる単語（境界をまたぐ2語の1語目）。長さの昇順。
        cover_bits は単語そのものに対して計算します。
        完全一致のエントリでは常に空です。
    """

    prefix: str
    candidates: Tuple[CandidateWord, ...]
    leads: Tuple[CandidateWord, ...] = ()

    def accepts(self, previous_word: str) -> bool:
        """直前の単語がこの分割点の前半で終わっているかを返します。"""
        return previous_word.endswith(self.prefix)


@dataclass(frozen=True)
class ContinuationTable:
    """
    検索キー1つ分の継続表です。

    entries の先頭は必ず完全一致（prefix == ""）のエントリで、
    その後に分割点ごとのエントリが前半の短い順に続きます。
    """

    key: str
    index: int
    entries: Tuple[BoundaryEntry, ...]

    @property
    def full_match(self) -> BoundaryEntry:
        return self.entries[0]

    def entries_after(self, previous_word: str) -> Iterator[BoundaryEntry]:
        for entry in self.entries:
            if entry.accepts(previous_word):
                yield entry


@dataclass
class BestResult:
    """
    探索中の最良解です。探索エンジンだけが書き換えます。

    Attributes
    ----------
    terms : list of str
        単語の並び。
    cost : int
        単語の文字数の合計。
    """

    terms: List[str]
    cost: int

    @property
    def length(self) -> int:
        """単語数を返します。"""
        return len(self.terms)


@dataclass(frozen=True)
class CoverResult:
    """
    find_minimum_cover() の戻り値です。

    ``terms, total_cost = find_minimum_cover(...)`` のように
    2要素のタプルとして展開することもできます。

    Attributes
    ----------
    terms : tuple of str
        見つかった単語の並び。被覆できなかった場合は空。
    total_cost : int or None
        文字数の合計。被覆できなかった場合は None。
    search_keys : tuple of str
        正規化後の検索キー（ビット番号順）。
    greedy_cost : int or None
        初期上界に使った貪欲解の文字数。
    nodes_visited : int
        分枝限定法で訪れたノード数。
    complete : bool
        探索を最後まで終えたか（ノード上限で打ち切られたら False）。
    vocabulary_size : int
        絞り込み後の語彙数（比較には使いません）。
    """

    terms: Tuple[str, ...]
    total_cost: Optional[int]
    search_keys: Tuple[str, ...] = ()
    greedy_cost: Optional[int] = None
    nodes_visited: int = 0
    complete: bool = True
    vocabulary_size: int = field(default=0, compare=False)

    @property
    def covered(self) -> bool:
        """すべての検索キーを被覆する解が得られたかを返します。"""
        return self.total_cost is not None

    def __iter__(self) -> Iterator:
        return iter((self.terms, self.total_cost))
