"""FinalRanker — バトル後の最終ランキング.

final_score = survey_score + win_count + language_bonus を主キーとし、
同点は以下の順で解決する（前段が完全一致のときのみ次段へ進む）:

1. final_score 降順
2. win_count 降順
3. survey_score 降順
4. 直接対決（最初に見つかった対戦記録の勝者が上）
5. メンバーID 昇順

ID が一意であれば必ず全順序になるため、同じ入力からは常に同じ
ランキングが得られる。例外を送出しない。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import cmp_to_key

from oshichecker.core.models import (
    CANDIDATE_COUNT,
    BattleRecord,
    CandidateMember,
    KoreanLevel,
)

from .language import language_bonus

logger = logging.getLogger(__name__)


def find_direct_battle(
    battle_records: Sequence[BattleRecord],
    first_id: str,
    second_id: str,
) -> BattleRecord | None:
    """{first_id, second_id} の対戦記録のうち最初の1件を返す."""
    for record in battle_records:
        if record.involves(first_id, second_id):
            return record
    return None


def _compare_desc(a: float, b: float) -> int:
    if a == b:
        return 0
    return -1 if a > b else 1


class FinalRanker:
    """スコア・勝利数・言語ボーナスから最終ランキングを算出する."""

    def __init__(self, *, candidate_count: int = CANDIDATE_COUNT) -> None:
        self.candidate_count = candidate_count

    def rank(
        self,
        candidates: Sequence[CandidateMember],
        battle_records: Sequence[BattleRecord],
        korean_level: KoreanLevel | str = KoreanLevel.NONE,
        prefer_japanese_support: bool = True,
    ) -> list[CandidateMember]:
        """最終ランキングを返す.

        Args:
            candidates: バトル後の候補スナップショット
            battle_records: バトルの対戦記録
            korean_level: ユーザーの韓国語レベル
            prefer_japanese_support: False の場合 language_bonus は常に 0

        Returns:
            preference_score / language_bonus / final_score を埋めた新しい
            CandidateMember の上位 candidate_count 件（良い順）
        """
        scored = [
            self._with_scores(candidate, korean_level, prefer_japanese_support)
            for candidate in candidates
        ]

        def compare(a: CandidateMember, b: CandidateMember) -> int:
            return self.compare(a, b, battle_records)

        ranked = sorted(scored, key=cmp_to_key(compare))[: self.candidate_count]
        logger.debug(
            "最終ランキング算出: candidates=%d records=%d returned=%d",
            len(scored),
            len(battle_records),
            len(ranked),
        )
        return ranked

    @staticmethod
    def compare(
        a: CandidateMember,
        b: CandidateMember,
        battle_records: Sequence[BattleRecord],
    ) -> int:
        """タイブレーク込みの比較. a が上位なら負、b が上位なら正."""
        for a_value, b_value in (
            (a.final_score, b.final_score),
            (a.win_count, b.win_count),
            (a.survey_score, b.survey_score),
        ):
            result = _compare_desc(a_value, b_value)
            if result:
                return result

        direct = find_direct_battle(battle_records, a.member_id, b.member_id)
        if direct is not None:
            logger.debug(
                "直接対決でタイブレーク: %s vs %s -> %s", a.member_id, b.member_id, direct.winner_id
            )
            if direct.winner_id == a.member_id:
                return -1
            if direct.winner_id == b.member_id:
                return 1

        if a.member_id == b.member_id:
            return 0
        return -1 if a.member_id < b.member_id else 1

    @staticmethod
    def _with_scores(
        candidate: CandidateMember,
        korean_level: KoreanLevel | str,
        prefer_japanese_support: bool,
    ) -> CandidateMember:
        preference_score = candidate.survey_score + candidate.win_count
        bonus = (
            language_bonus(korean_level, candidate.member.jp_support)
            if prefer_japanese_support
            else 0.0
        )
        return candidate.model_copy(
            update={
                "preference_score": preference_score,
                "language_bonus": bonus,
                "final_score": preference_score + bonus,
            }
        )
