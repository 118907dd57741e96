# -*- coding: utf-8 -*-
"""
分枝限定法（branch and bound）による最短被覆の探索を行うモジュールです。

ざっくり流れ
------------
1. 未被覆キーのビット集合 remaining を全ビット立てた状態から始める
2. remaining に残っている各キー i について、継続表 i のエントリを調べる
   - 単独で置く：直前の単語がエントリの前半で終わっていれば、
     候補語を1語置く（完全一致のエントリ（前半 ""）は常に置ける）
   - 2語の組で置く：前半で終わる単語（leads）と後半で始まる候補語を
     続けて置き、境界をまたいで キー i を完成させる
3. 候補語を短い順に試し、作業領域 workspace[depth] に書いて再帰する
4. 「これまでの文字数 + 候補の長さ」が最良解に届いたら、
   そのリストの残りの候補はすべて打ち切る（長さの昇順なので改善し得ない）
5. remaining が 0 になったら、最良解より良いときだけ置き換える

単語を置くたびに、単語そのものが含むキーに加えて、直前の単語との
境目をまたいで完成するキーも JunctionIndex で求めて被覆済みにします。

解の比べ方
----------
基本は文字数だけで比べ、同じ文字数なら先に見つけた解を残します。
ただし上界がまだ初期解（貪欲解）のままのあいだは、同じ文字数でも
単語数が少なければ置き換えます。探索で一度でも最良解を更新したら、
以降は文字数だけで比べます。

workspace と最良解は SearchContext にまとめ、すべての再帰呼び出しで共有します。
depth より後ろの workspace の中身は、次に上書きされるまで意味を持ちません。

1つの検索キーは高々2つの連続した単語にまたがる、という前提で表を作っているため、
3語以上にまたがってキーが完成するような並びは探索対象に含まれません。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..types import BestResult, BoundaryEntry, ContinuationTable
from ..config import SEARCH_LOG_INTERVAL
from ..cover.bitmask import full_mask, iter_bits
from ..dictionary.indexer import JunctionIndex, junction_index_from_tables
from ..logging_utils import get_logger

logger = get_logger()


@dataclass
class SearchStats:
    """
    探索の統計情報です。

    Attributes
    ----------
    nodes_visited : int
        訪れた探索ノード数。
    improvements : int
        最良解を更新した回数。
    complete : bool
        ノード上限に達せず最後まで探索したかどうか。
    """

    nodes_visited: int = 0
    improvements: int = 0
    complete: bool = True


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。

    best と bound / bound_length を書き換えるのは終端状態の処理だけです。
    seeded は「上界がまだ初期解のまま」であることを表します。
    """

    tables: Sequence[ContinuationTable]
    workspace: List[str]
    junctions: JunctionIndex = field(default_factory=JunctionIndex)
    best: Optional[BestResult] = None
    bound: float = math.inf
    bound_length: float = math.inf
    seeded: bool = False
    prune: bool = True
    max_nodes: Optional[int] = None
    stats: SearchStats = field(default_factory=SearchStats)

    def improves(self, cost: int, words: int) -> bool:
        """(文字数, 単語数) の解が今の最良解より良いかを返します。"""
        if cost < self.bound:
            return True
        return self.seeded and cost == self.bound and words < self.bound_length

    def record(self, depth: int, cost: int) -> None:
        """workspace の先頭 depth 語を新しい最良解として保存します。"""
        self.best = BestResult(terms=self.workspace[:depth], cost=cost)
        self.bound = cost
        self.bound_length = depth
        self.seeded = False
        self.stats.improvements += 1
        logger.info(
            "[search] new best: cost=%d words=%d (nodes_visited=%d)",
            cost,
            depth,
            self.stats.nodes_visited,
        )


def _place_pairs(
    ctx: SearchContext,
    entry: BoundaryEntry,
    remaining: int,
    depth: int,
    cost: int,
    previous: str,
) -> None:
    """entry の前半で終わる単語と、後半で始まる単語を2語続けて置きます。"""
    workspace = ctx.workspace
    junctions = ctx.junctions
    shortest = len(entry.candidates[0].word)

    for lead in entry.leads:
        lead_cost = cost + len(lead.word)
        if ctx.prune and not ctx.improves(lead_cost + shortest, depth + 2):
            break

        lead_bits = lead.cover_bits | junctions.spanning_bits(previous, lead.word)
        # 1語目だけで被覆が進むなら、単独で置く経路で同じ並びに届く
        if lead_bits & remaining:
            continue

        workspace[depth] = lead.word
        for cand in entry.candidates:
            next_cost = lead_cost + len(cand.word)
            if ctx.prune and not ctx.improves(next_cost, depth + 2):
                break

            bits = cand.cover_bits | junctions.spanning_bits(lead.word, cand.word)
            workspace[depth + 1] = cand.word
            _visit(ctx, remaining & ~bits, depth + 2, next_cost)
            if not ctx.stats.complete:
                return


def _visit(ctx: SearchContext, remaining: int, depth: int, cost: int) -> None:
    stats = ctx.stats
    stats.nodes_visited += 1
    if ctx.max_nodes is not None and stats.nodes_visited > ctx.max_nodes:
        stats.complete = False
        return

    if stats.nodes_visited % SEARCH_LOG_INTERVAL == 0:
        logger.info(
            "[search] nodes_visited = %d, best_cost=%s, depth=%d",
            stats.nodes_visited,
            ctx.bound,
            depth,
        )

    # 終端状態：すべてのキーが被覆済み
    if remaining == 0:
        if ctx.improves(cost, depth):
            ctx.record(depth, cost)
        return

    workspace = ctx.workspace
    junctions = ctx.junctions
    previous = workspace[depth - 1] if depth > 0 else ""

    for i in iter_bits(remaining):
        for entry in ctx.tables[i].entries:
            if entry.accepts(previous):
                for cand in entry.candidates:
                    next_cost = cost + len(cand.word)
                    # 候補は長さの昇順なので、ここで打ち切ればこのリストの残りも不要
                    if ctx.prune and not ctx.improves(next_cost, depth + 1):
                        break

                    bits = cand.cover_bits | junctions.spanning_bits(previous, cand.word)
                    workspace[depth] = cand.word
                    _visit(ctx, remaining & ~bits, depth + 1, next_cost)
                    if not stats.complete:
                        return

            if entry.leads:
                _place_pairs(ctx, entry, remaining, depth, cost, previous)
                if not stats.complete:
                    return


def branch_and_bound_search(
    tables: Sequence[ContinuationTable],
    initial: Optional[BestResult] = None,
    prune: bool = True,
    max_nodes: Optional[int] = None,
) -> Tuple[Optional[BestResult], SearchStats]:
    """
    分枝限定法のエントリポイント。

    Parameters
    ----------
    tables : sequence of ContinuationTable
        キー番号順の継続表。
    initial : BestResult or None
        初期上界となる解（通常は貪欲解）。None なら上界は無限大。
    prune : bool
        False にすると長さによる打ち切りを行わず、すべての並びを調べます。
        結果（最小コスト）は変わらず、速度だけが変わります。
    max_nodes : int or None
        探索ノード数の上限。超えたら打ち切り、その時点の最良解を返します。

    Returns
    -------
    best : BestResult or None
        最良解。初期解がなく、被覆も見つからなかった場合は None。
    stats : SearchStats
        探索の統計情報。
    """
    n_keys = len(tables)
    ctx = SearchContext(
        tables=tables,
        # 1手（1語または2語の組）ごとに少なくとも1つのキーが被覆される
        workspace=[""] * (2 * n_keys),
        junctions=junction_index_from_tables(tables),
        prune=prune,
        max_nodes=max_nodes,
    )
    if initial is not None:
        ctx.best = BestResult(terms=list(initial.terms), cost=initial.cost)
        ctx.bound = initial.cost
        ctx.bound_length = initial.length
        ctx.seeded = True

    logger.info(
        "Branch and bound: keys=%d, initial_bound=%s, prune=%s",
        n_keys,
        ctx.bound,
        prune,
    )

    if n_keys:
        _visit(ctx, full_mask(n_keys), 0, 0)

    logger.info(
        "Branch and bound done: nodes_visited=%d, improvements=%d, complete=%s, best_cost=%s",
        ctx.stats.nodes_visited,
        ctx.stats.improvements,
        ctx.stats.complete,
        ctx.bound,
    )
    return ctx.best, ctx.stats
