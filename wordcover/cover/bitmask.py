# -*- coding: utf-8 -*-
"""
検索キーの被覆状態をビットマスクで表すモジュールです。

検索キー i が満たされていることを「ビット i が立っている」で表します。
幅は numpy の符号なし整数型（uint32 / uint64）に合わせ、
キー数がその幅を超えないことを探索前に一度だけ検査します。
探索中の演算は Python の int で行い、幅の検査だけを numpy に任せます。
"""

from __future__ import annotations

from typing import Dict, Iterator, Sequence, Type

import numpy as np

from ..config import DEFAULT_MASK_BITS
from ..errors import EmptySearchKeys, TooManySearchKeys

# ビット幅 -> numpy の符号なし整数型
MASK_DTYPES: Dict[int, Type[np.unsignedinteger]] = {
    32: np.uint32,
    64: np.uint64,
}


def mask_width(mask_bits: int = DEFAULT_MASK_BITS) -> int:
    """
    指定されたビット幅に対応する型の実際のビット数を返します。

    32 / 64 以外が指定された場合は ValueError を送出します。
    """
    dtype = MASK_DTYPES.get(mask_bits)
    if dtype is None:
        raise ValueError(
            f"Unsupported mask width: {mask_bits} (expected one of {sorted(MASK_DTYPES)})"
        )
    return int(np.iinfo(dtype).bits)


def check_capacity(
    search_keys: Sequence[str],
    mask_bits: int = DEFAULT_MASK_BITS,
    allow_empty: bool = True,
) -> int:
    """
    検索キーの数がビットマスクに収まるかを検査します。

    Parameters
    ----------
    search_keys : sequence of str
        正規化済みの検索キー。
    mask_bits : int
        ビットマスクの幅（32 または 64）。
    allow_empty : bool
        False の場合、キーが0個なら EmptySearchKeys を送出します。

    Returns
    -------
    int
        ビットマスクの幅（= 扱えるキー数の上限）。

    Raises
    ------
    TooManySearchKeys
        キー数が幅を超えている場合。
    """
    capacity = mask_width(mask_bits)
    count = len(search_keys)
    if count > capacity:
        raise TooManySearchKeys(count, capacity)
    if count == 0 and not allow_empty:
        raise EmptySearchKeys()
    return capacity


def full_mask(n_keys: int) -> int:
    """n_keys 個すべてのビットが立ったマスク（= 未被覆キーの初期値）を返します。"""
    return (1 << n_keys) - 1


def encode_cover(text: str, search_keys: Sequence[str]) -> int:
    """
    text が部分文字列として完全に含む検索キーのビット集合を返します。

    text は単語そのもの、または「境界の前半 + 単語」です。
    """
    bits = 0
    for i, key in enumerate(search_keys):
        if key in text:
            bits |= 1 << i
    return bits


def iter_bits(mask: int) -> Iterator[int]:
    """mask に立っているビットの番号を小さい順に返します。"""
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low
