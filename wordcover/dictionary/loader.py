# -*- coding: utf-8 -*-
"""
単語リストを読み込むモジュールです。

対応フォーマット：
- 1行1単語のテキストファイル（例: /usr/share/dict/words）
- 'word' 列を持つ CSV

ここで語彙の前提条件をそろえます：
- 小文字に変換し、前後の空白を除く
- 所有格（"'s" で終わる語）を除く
- MIN_WORD_LENGTH 未満の語（1文字語）を除く
- 重複を除く

戻り値：
- word   : 単語
- length : 文字数
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..config import MIN_WORD_LENGTH, POSSESSIVE_SUFFIX
from ..logging_utils import get_logger

logger = get_logger()


def _read_words(p: Path) -> pd.Series:
    if p.suffix.lower() == ".csv":
        df = pd.read_csv(p, encoding="utf-8-sig", encoding_errors="replace", low_memory=False)
        if "word" not in df.columns:
            raise ValueError("Word list CSV must have a 'word' column.")
        return df["word"]

    # テキストは1行1単語。引用符やコメント記号を特別扱いしない
    with p.open(encoding="utf-8", errors="replace") as f:
        return pd.Series([line.rstrip("\n") for line in f], dtype=object)


def normalize_vocabulary_frame(words: pd.Series) -> pd.DataFrame:
    """
    単語の Series を、ローダーの前提条件を満たす DataFrame に変換します。

    Parameters
    ----------
    words : pandas.Series
        生の単語列。欠損値を含んでいてもよい。

    Returns
    -------
    pandas.DataFrame
        'word', 'length' 列を持つ DataFrame（重複なし）。
    """
    s = words.dropna().astype(str).str.strip().str.lower()
    s = s[~s.str.endswith(POSSESSIVE_SUFFIX)]
    s = s[s.str.len() >= MIN_WORD_LENGTH]

    df = pd.DataFrame({"word": s})
    df = df.drop_duplicates(subset=["word"], keep="first")
    df["length"] = df["word"].str.len()

    # index を 0 から振り直しておくと扱いやすい
    return df.reset_index(drop=True)


def load_vocabulary(path: str | Path) -> pd.DataFrame:
    """
    単語リストを読み込み、統一フォーマットの DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        テキストまたは CSV ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        'word', 'length' 列を持つ DataFrame。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Word list not found: {p}")

    raw = _read_words(p)
    df = normalize_vocabulary_frame(raw)
    logger.info("Loaded %d words from %s (%d raw lines).", len(df), p, len(raw))
    return df
