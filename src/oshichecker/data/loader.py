"""静的データの読み込み — メンバー・グループ・質問・セッション

JSON（.json）または YAML（.yaml / .yml）のファイルを読み込み、
pydantic でスキーマ検証する。スコアリングエンジンは検証済みの
データのみを受け取る前提のため、不正な入力はここで CatalogLoadError にする。
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from oshichecker.attributes import AttributeCatalog, get_catalog
from oshichecker.battle import BattleState
from oshichecker.core.errors import CatalogLoadError
from oshichecker.core.models import BattleRecord, CandidateMember, Group, Member
from oshichecker.survey import Question

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_data(path: Path | str) -> Any:
    """拡張子に応じて JSON / YAML を読み込む"""
    path = Path(path)
    if not path.exists():
        raise CatalogLoadError(f"データファイルが見つかりません: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"データファイルを読み込めません: {path}: {e}") from e


def _validate(adapter: TypeAdapter[T], data: Any, path: Path | str) -> T:
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogLoadError(f"データ形式が不正です: {path}: {e}") from e


def _check_unique_ids(ids: Iterable[str], label: str, path: Path | str) -> None:
    """IDの重複があれば CatalogLoadError"""
    seen: set[str] = set()
    duplicates: list[str] = []
    for item_id in ids:
        if item_id in seen and item_id not in duplicates:
            duplicates.append(item_id)
        seen.add(item_id)
    if duplicates:
        raise CatalogLoadError(f"{label}のIDが重複しています: {duplicates} ({path})")


_MEMBERS = TypeAdapter(list[Member])
_GROUPS = TypeAdapter(list[Group])
_QUESTIONS = TypeAdapter(list[Question])
_SURVEY_SCORES = TypeAdapter(dict[str, float])


def load_members(path: Path | str, catalog: AttributeCatalog | None = None) -> list[Member]:
    """メンバー一覧を読み込む

    カタログに無い属性キーは警告を出すが、そのまま読み込む。

    Raises:
        CatalogLoadError: ファイルが無い・読めない・形式が不正、またはIDが重複している場合
    """
    members = _validate(_MEMBERS, _read_data(path), path)
    _check_unique_ids((member.id for member in members), "メンバー", path)
    catalog = catalog or get_catalog()
    for member in members:
        unknown = [key for key in member.scores if not catalog.is_valid_key(key)]
        if unknown:
            logger.warning("メンバー %s に未登録の属性キーがあります: %s", member.id, unknown)
    logger.info("メンバーを読み込みました: %d件 (%s)", len(members), path)
    return members


def load_groups(path: Path | str) -> list[Group]:
    """グループ一覧を読み込む"""
    groups = _validate(_GROUPS, _read_data(path), path)
    logger.info("グループを読み込みました: %d件 (%s)", len(groups), path)
    return groups


def load_questions(path: Path | str) -> list[Question]:
    """質問一覧を読み込む"""
    questions = _validate(_QUESTIONS, _read_data(path), path)
    logger.info("質問を読み込みました: %d件 (%s)", len(questions), path)
    return questions


def load_survey_scores(path: Path | str) -> dict[str, float]:
    """アンケート集計済みの重み（属性キー → 値）を読み込む"""
    return _validate(_SURVEY_SCORES, _read_data(path) or {}, path)


class CandidateEntry(BaseModel):
    """セッションファイル中の候補1件（メンバーはIDで参照）"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    member_id: str
    survey_score: float = 0.0
    appearance_count: int = Field(default=0, ge=0)
    win_count: int = Field(default=0, ge=0)


class SessionFile(BaseModel):
    """セッションファイルのスキーマ"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    candidates: list[CandidateEntry] = Field(default_factory=list)
    battle_records: list[BattleRecord] = Field(default_factory=list)


_SESSION = TypeAdapter(SessionFile)


def load_session(path: Path | str, members: Sequence[Member]) -> BattleState:
    """バトル後のセッションを読み込み BattleState にする

    Raises:
        CatalogLoadError: 候補がメンバー一覧に存在しない、または候補が重複している場合など
    """
    session = _validate(_SESSION, _read_data(path) or {}, path)
    _check_unique_ids((entry.member_id for entry in session.candidates), "候補", path)
    members_by_id = {member.id: member for member in members}

    candidates = []
    for entry in session.candidates:
        member = members_by_id.get(entry.member_id)
        if member is None:
            raise CatalogLoadError(f"メンバー一覧に存在しない候補です: {entry.member_id} ({path})")
        candidates.append(
            CandidateMember(
                member=member,
                survey_score=entry.survey_score,
                appearance_count=entry.appearance_count,
                win_count=entry.win_count,
            )
        )

    return BattleState(
        candidates=tuple(candidates),
        records=tuple(session.battle_records),
        round=len(session.battle_records),
    )
