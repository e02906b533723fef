"""データ読み込みのテスト"""

from __future__ import annotations

import json
import logging

import pytest

from oshichecker.core.errors import CatalogLoadError
from oshichecker.core.models import JpSupportLevel
from oshichecker.data import (
    load_groups,
    load_members,
    load_questions,
    load_session,
    load_survey_scores,
)

MEMBERS = [
    {
        "id": "m1",
        "groupId": "g1",
        "name": {"ja": "ミナ", "en": "Mina"},
        "scores": {"cute": 5, "dance": 3},
        "jpSupport": "ok",
    },
    {
        "id": "m2",
        "groupId": "g1",
        "name": {"ja": "ユナ"},
        "scores": {"cool": 4},
        "covers": {"artist_x": 2},
    },
]


def _write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoadMembers:
    """load_members() のテスト"""

    def test_load_json(self, tmp_path) -> None:
        # Arrange
        path = _write_json(tmp_path / "members.json", MEMBERS)

        # Act
        members = load_members(path)

        # Assert
        assert [m.id for m in members] == ["m1", "m2"]
        assert members[0].group_id == "g1"
        assert members[0].jp_support == JpSupportLevel.OK
        assert members[1].jp_support == JpSupportLevel.UNKNOWN
        assert members[1].covers == {"artist_x": 2}

    def test_load_yaml(self, tmp_path) -> None:
        path = tmp_path / "members.yaml"
        path.write_text(
            """
- id: m1
  groupId: g1
  name: {ja: ミナ}
  scores: {cute: 5}
  jpSupport: some
""",
            encoding="utf-8",
        )

        members = load_members(path)

        assert members[0].jp_support == JpSupportLevel.SOME

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(CatalogLoadError, match="見つかりません"):
            load_members(tmp_path / "nope.json")

    def test_broken_json(self, tmp_path) -> None:
        path = tmp_path / "members.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            load_members(path)

    def test_invalid_schema(self, tmp_path) -> None:
        """必須項目の欠落や不正な列挙値はエラー"""
        path = _write_json(tmp_path / "members.json", [{"id": "m1", "jpSupport": "maybe"}])

        with pytest.raises(CatalogLoadError, match="データ形式が不正"):
            load_members(path)

    def test_unknown_attribute_key_warns(self, tmp_path, caplog) -> None:
        """カタログに無い属性キーは警告して読み込む"""
        data = [dict(MEMBERS[0], scores={"cute": 1, "sparkly": 2})]
        path = _write_json(tmp_path / "members.json", data)

        with caplog.at_level(logging.WARNING, logger="oshichecker.data.loader"):
            members = load_members(path)

        assert members[0].scores["sparkly"] == 2
        assert "sparkly" in caplog.text

    def test_duplicate_member_id(self, tmp_path) -> None:
        """同じIDのメンバーが複数あるとエラー"""
        # Arrange
        data = [MEMBERS[0], dict(MEMBERS[1], id="m1")]
        path = _write_json(tmp_path / "members.json", data)

        # Act & Assert
        with pytest.raises(CatalogLoadError, match="重複") as excinfo:
            load_members(path)
        assert "m1" in str(excinfo.value)


class TestOtherLoaders:
    def test_load_groups(self, tmp_path) -> None:
        path = _write_json(tmp_path / "groups.json", [{"id": "g1", "name": {"ja": "グループ"}}])

        groups = load_groups(path)

        assert groups[0].name.ja == "グループ"

    def test_load_questions(self, tmp_path) -> None:
        data = [
            {
                "id": "q1",
                "type": "multi",
                "options": [{"scoreKey": "cute"}, {"id": "o2", "scoreKey": "cool", "scoreValue": 2}],
                "maxSelect": 2,
            }
        ]
        path = _write_json(tmp_path / "questions.json", data)

        questions = load_questions(path)

        assert questions[0].is_multi
        assert questions[0].options[1].score_value == 2

    def test_load_survey_scores(self, tmp_path) -> None:
        path = _write_json(tmp_path / "answers.json", {"cute": 2, "dance": 1.5})

        assert load_survey_scores(path) == {"cute": 2.0, "dance": 1.5}


class TestLoadSession:
    """load_session() のテスト"""

    def test_load(self, tmp_path) -> None:
        # Arrange
        members = load_members(_write_json(tmp_path / "members.json", MEMBERS))
        session = {
            "candidates": [
                {"memberId": "m1", "surveyScore": 15, "appearanceCount": 1, "winCount": 1},
                {"memberId": "m2", "surveyScore": 8, "appearanceCount": 1},
            ],
            "battleRecords": [{"memberA": "m1", "memberB": "m2", "winnerId": "m1"}],
        }
        path = _write_json(tmp_path / "session.json", session)

        # Act
        state = load_session(path, members)

        # Assert
        assert [c.member_id for c in state.candidates] == ["m1", "m2"]
        assert state.candidate("m1").win_count == 1
        assert state.records[0].winner_id == "m1"
        assert state.round == 1

    def test_unknown_candidate(self, tmp_path) -> None:
        members = load_members(_write_json(tmp_path / "members.json", MEMBERS))
        path = _write_json(tmp_path / "session.json", {"candidates": [{"memberId": "m9"}]})

        with pytest.raises(CatalogLoadError, match="m9"):
            load_session(path, members)

    def test_duplicate_candidate(self, tmp_path) -> None:
        """同じメンバーの候補が複数あるとエラー"""
        # Arrange
        members = load_members(_write_json(tmp_path / "members.json", MEMBERS))
        session = {
            "candidates": [
                {"memberId": "m1", "surveyScore": 5},
                {"memberId": "m1", "surveyScore": 5},
                {"memberId": "m2"},
            ],
        }
        path = _write_json(tmp_path / "session.json", session)

        # Act & Assert
        with pytest.raises(CatalogLoadError, match="重複"):
            load_session(path, members)

    def test_winner_outside_pair(self, tmp_path) -> None:
        """勝者がペア外の対戦記録は不正"""
        members = load_members(_write_json(tmp_path / "members.json", MEMBERS))
        session = {"battleRecords": [{"memberA": "m1", "memberB": "m2", "winnerId": "m3"}]}
        path = _write_json(tmp_path / "session.json", session)

        with pytest.raises(CatalogLoadError):
            load_session(path, members)
