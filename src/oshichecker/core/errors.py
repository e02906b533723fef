"""Oshi Checker 例外定義

スコアリングエンジン自体は例外を送出しない。ここで定義する例外は
データ読み込み・アンケート入力・バトル記録といった境界でのみ使う。
"""


class OshiCheckerError(Exception):
    """Oshi Checker の基底例外"""


class CatalogLoadError(OshiCheckerError):
    """メンバー・グループ・質問データの読み込み失敗"""


class InvalidSelectionError(OshiCheckerError, ValueError):
    """複数選択の回答数が min_select / max_select の範囲外"""


class InvalidBattleError(OshiCheckerError, ValueError):
    """候補プール外のメンバーや不正な勝者を含むバトル結果"""
