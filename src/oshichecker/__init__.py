"""Oshi Checker — アンケートと対決から推しメンバーを診断するスコアリングエンジン"""

__version__ = "0.1.0"
