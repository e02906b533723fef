"""バトル結果の受け渡し — BattleState

候補プールと対戦記録を不変スナップショットとして保持する。
record_result() は登場回数・勝利数を更新した新しい状態を返し、
最終ランキングには常にその時点のスナップショットが渡される。
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from oshichecker.core.config import get_settings
from oshichecker.core.errors import InvalidBattleError
from oshichecker.core.models import BattleRecord, CandidateMember, KoreanLevel
from oshichecker.scoring.ranking import FinalRanker

logger = logging.getLogger(__name__)


class BattleState(BaseModel):
    """バトルフェーズの状態"""

    model_config = ConfigDict(frozen=True)

    candidates: tuple[CandidateMember, ...] = Field(default=(), description="候補プール")
    records: tuple[BattleRecord, ...] = Field(default=(), description="対戦記録（記録順）")
    round: int = Field(default=0, ge=0, description="完了したラウンド数")

    def candidate(self, member_id: str) -> CandidateMember | None:
        for candidate in self.candidates:
            if candidate.member_id == member_id:
                return candidate
        return None

    def record_result(self, member_a: str, member_b: str, winner_id: str) -> BattleState:
        """1ラウンドの結果を反映した新しい状態を返す

        両者の appearance_count と勝者の win_count を1増やし、対戦記録を追加する。

        Raises:
            InvalidBattleError: 同一メンバー同士、プール外のメンバー、
                またはペア外の勝者が指定された場合
        """
        if member_a == member_b:
            raise InvalidBattleError(f"同じメンバー同士は対戦できません: {member_a}")
        for member_id in (member_a, member_b):
            if self.candidate(member_id) is None:
                raise InvalidBattleError(f"候補プールに存在しないメンバーです: {member_id}")
        if winner_id not in (member_a, member_b):
            raise InvalidBattleError(
                f"勝者 '{winner_id}' は対戦ペア ({member_a}, {member_b}) に含まれていません"
            )

        updated = []
        for candidate in self.candidates:
            if candidate.member_id in (member_a, member_b):
                won = candidate.member_id == winner_id
                candidate = candidate.model_copy(
                    update={
                        "appearance_count": candidate.appearance_count + 1,
                        "win_count": candidate.win_count + (1 if won else 0),
                    }
                )
            updated.append(candidate)

        record = BattleRecord(member_a=member_a, member_b=member_b, winner_id=winner_id)
        logger.debug("ラウンド %d: %s vs %s -> %s", self.round + 1, member_a, member_b, winner_id)
        return self.model_copy(
            update={
                "candidates": tuple(updated),
                "records": (*self.records, record),
                "round": self.round + 1,
            }
        )

    def is_complete(self, rounds: int | None = None) -> bool:
        """指定ラウンド数（省略時は設定の scoring.battle_rounds）を消化したか"""
        if rounds is None:
            rounds = get_settings().scoring.battle_rounds
        return self.round >= rounds

    def rank(
        self,
        ranker: FinalRanker | None = None,
        korean_level: KoreanLevel | str = KoreanLevel.NONE,
        prefer_japanese_support: bool = True,
    ) -> list[CandidateMember]:
        """現在のスナップショットで最終ランキングを算出する"""
        ranker = ranker or FinalRanker()
        return ranker.rank(
            self.candidates,
            self.records,
            korean_level=korean_level,
            prefer_japanese_support=prefer_japanese_support,
        )
