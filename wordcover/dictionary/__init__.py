# -*- coding: utf-8 -*-
"""
wordcover.dictionary パッケージ

単語リスト（語彙）に関する処理をまとめたサブパッケージです。
- loader.py     : 単語リストファイルの読み込み
- vocabulary.py : 検索キーの正規化と語彙の絞り込み
- indexer.py    : 検索キーごとの継続表と、2語の境目のインデックスの構築
"""
