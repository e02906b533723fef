"""SurveyScorer — アンケート回答からのメンバースコアリング.

ユーザーの属性別重み（アンケート集計値）とメンバーの属性親和度の
積和を survey_score とし、降順に並べて上位を候補プールとして切り出す。

例外を送出しない純粋ロジックコンポーネント。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from oshichecker.core.models import CANDIDATE_COUNT, CandidateMember, Member

logger = logging.getLogger(__name__)


class SurveyScorer:
    """アンケートスコアに基づいてメンバーをスコアリングする."""

    def __init__(self, *, candidate_count: int = CANDIDATE_COUNT) -> None:
        self.candidate_count = candidate_count

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def score(
        self,
        members: Sequence[Member],
        survey_scores: Mapping[str, float],
    ) -> list[CandidateMember]:
        """全メンバーをスコアリングし、survey_score 降順で返す.

        親和度は scores → covers → 0 の順で引く。同点は入力順を保つ
        （安定ソート、二次キーなし）。

        Args:
            members: 全メンバーリスト
            survey_scores: 属性キー → ユーザーの累積重み

        Returns:
            survey_score 降順の CandidateMember リスト
        """
        scored = [
            CandidateMember(member=member, survey_score=self._survey_score(member, survey_scores))
            for member in members
        ]
        scored.sort(key=lambda c: c.survey_score, reverse=True)

        logger.debug("アンケートスコア算出: members=%d keys=%d", len(scored), len(survey_scores))
        return scored

    def top_n(
        self,
        scored: Sequence[CandidateMember],
        count: int | None = None,
    ) -> list[CandidateMember]:
        """先頭から count 件を切り出す（再ソートしない）.

        Args:
            scored: score() の結果
            count: 件数。None の場合は candidate_count
        """
        n = self.candidate_count if count is None else count
        return list(scored[: max(n, 0)])

    def candidate_pool(
        self,
        members: Sequence[Member],
        survey_scores: Mapping[str, float],
    ) -> list[CandidateMember]:
        """score + top_n を一括実行して候補プールを返す."""
        return self.top_n(self.score(members, survey_scores))

    # ------------------------------------------------------------------
    # private
    # ------------------------------------------------------------------

    @staticmethod
    def _survey_score(member: Member, survey_scores: Mapping[str, float]) -> float:
        total = 0.0
        for key, weight in survey_scores.items():
            total += member.affinity(key) * weight
        return total
