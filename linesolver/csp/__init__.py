# -*- coding: utf-8 -*-
"""
linesolver.csp パッケージ

探索のコア部分をまとめています。

- board.py  : 盤面の状態と、辺の追加・取り消し
- checks.py : 色の完成判定と白マス判定
- search.py : 色ごとの深さ優先探索（バックトラック）
"""
