"""スコアリング・ランキングエンジン

アンケート集計 → 候補プール → （バトル） → 最終ランキング のパイプライン。
"""

from .language import (
    LANGUAGE_BONUS_TABLE,
    language_bonus,
    recommended_prefer_japanese_support,
)
from .ranking import FinalRanker, find_direct_battle
from .survey import SurveyScorer

__all__ = [
    "FinalRanker",
    "LANGUAGE_BONUS_TABLE",
    "SurveyScorer",
    "find_direct_battle",
    "language_bonus",
    "recommended_prefer_japanese_support",
]
