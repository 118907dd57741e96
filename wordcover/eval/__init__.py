# -*- coding: utf-8 -*-
"""
wordcover.eval パッケージ

探索結果を、探索側の内部表現とは独立に検証する処理をまとめています。
"""
