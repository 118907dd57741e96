# -*- coding: utf-8 -*-
"""
wordcover.cover パッケージ

被覆（すべての検索キーを含む単語列）の探索に関する処理をまとめています。

- bitmask.py : 検索キー集合のビットマスク表現
- greedy.py  : 初期上界に使う貪欲解
- search.py  : 分枝限定法による深さ優先探索
"""
