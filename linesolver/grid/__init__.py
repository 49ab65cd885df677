# -*- coding: utf-8 -*-
"""
linesolver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- directions.py : 8方向と辺の保存場所の計算
- parser.py     : テキストや DataFrame から内部表現への変換
- validator.py  : 端点の個数チェック
"""
