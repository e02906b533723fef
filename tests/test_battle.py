"""BattleState テスト — バトル結果の不変スナップショット"""

from __future__ import annotations

import pytest

from oshichecker.battle import BattleState
from oshichecker.core.errors import InvalidBattleError
from oshichecker.core.models import (
    CandidateMember,
    JpSupportLevel,
    KoreanLevel,
    LocalizedText,
    Member,
)
from oshichecker.scoring.ranking import FinalRanker


def _make_candidate(
    member_id: str,
    survey_score: float = 0.0,
    jp_support: JpSupportLevel = JpSupportLevel.UNKNOWN,
) -> CandidateMember:
    """テスト用CandidateMemberを生成"""
    member = Member(
        id=member_id,
        group_id="g1",
        name=LocalizedText(ja=f"メンバー{member_id}"),
        jp_support=jp_support,
    )
    return CandidateMember(member=member, survey_score=survey_score)


def _state() -> BattleState:
    return BattleState(
        candidates=(
            _make_candidate("m1", survey_score=3.0),
            _make_candidate("m2", survey_score=3.0),
            _make_candidate("m3", survey_score=1.0),
        )
    )


class TestRecordResult:
    """record_result() のテスト"""

    def test_counts_updated(self) -> None:
        # Arrange
        state = _state()

        # Act
        new_state = state.record_result("m1", "m2", "m2")

        # Assert
        assert new_state.candidate("m1").appearance_count == 1
        assert new_state.candidate("m1").win_count == 0
        assert new_state.candidate("m2").appearance_count == 1
        assert new_state.candidate("m2").win_count == 1
        assert new_state.candidate("m3").appearance_count == 0
        assert new_state.round == 1
        assert len(new_state.records) == 1
        assert new_state.records[0].winner_id == "m2"

    def test_previous_snapshot_unchanged(self) -> None:
        """元のスナップショットは変更されない"""
        state = _state()

        state.record_result("m1", "m2", "m1")

        assert state.round == 0
        assert state.records == ()
        assert state.candidate("m1").win_count == 0

    def test_same_member_rejected(self) -> None:
        with pytest.raises(InvalidBattleError):
            _state().record_result("m1", "m1", "m1")

    def test_member_outside_pool_rejected(self) -> None:
        with pytest.raises(InvalidBattleError):
            _state().record_result("m1", "m9", "m1")

    def test_winner_outside_pair_rejected(self) -> None:
        with pytest.raises(InvalidBattleError):
            _state().record_result("m1", "m2", "m3")

    def test_is_complete(self) -> None:
        state = _state().record_result("m1", "m2", "m1").record_result("m2", "m3", "m3")

        assert state.is_complete(2) is True
        assert state.is_complete(10) is False

    def test_is_complete_uses_configured_rounds(self, tmp_path, monkeypatch) -> None:
        """ラウンド数省略時は設定の battle_rounds を使う"""
        # Arrange
        monkeypatch.chdir(tmp_path)
        state = _state().record_result("m1", "m2", "m1").record_result("m2", "m3", "m3")

        # Act & Assert: 既定は10ラウンド
        assert state.is_complete() is False

        monkeypatch.setattr("oshichecker.core.config._settings", None)
        monkeypatch.setenv("OSHICHECKER_SCORING__BATTLE_ROUNDS", "2")
        assert state.is_complete() is True


class TestRankFromState:
    """スナップショットから最終ランキングへの受け渡し"""

    def test_rank_uses_wins_and_records(self) -> None:
        # Arrange: m1 と m2 は survey 同点、m2 が直接対決で勝利
        state = _state().record_result("m1", "m2", "m2")

        # Act
        ranked = state.rank()

        # Assert
        assert [c.member_id for c in ranked] == ["m2", "m1", "m3"]
        assert ranked[0].final_score == 4.0

    def test_rank_with_language_settings(self) -> None:
        state = BattleState(
            candidates=(
                _make_candidate("m1", survey_score=2.0),
                _make_candidate("m2", survey_score=1.5, jp_support=JpSupportLevel.OK),
            )
        )

        assert [c.member_id for c in state.rank(korean_level=KoreanLevel.NONE)] == ["m2", "m1"]
        assert [
            c.member_id for c in state.rank(FinalRanker(candidate_count=1), KoreanLevel.NATIVE)
        ] == ["m1"]
