"""アンケート回答の累積状態 — SurveyState

回答のたびに属性キー別の重みを足し込み、新しい状態を返す。
全問回答後の survey_scores が SurveyScorer の入力になる。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from oshichecker.core.errors import InvalidSelectionError
from oshichecker.core.models import KoreanLevel

from .models import Question, QuestionOption

logger = logging.getLogger(__name__)


def merge_option_scores(options: Iterable[QuestionOption]) -> dict[str, float]:
    """選択肢群の加点をキーごとに合算する"""
    merged: dict[str, float] = {}
    for option in options:
        for key, value in option.score_map().items():
            merged[key] = merged.get(key, 0.0) + value
    return merged


def _add_scores(base: Mapping[str, float], delta: Mapping[str, float]) -> dict[str, float]:
    result = dict(base)
    for key, value in delta.items():
        result[key] = result.get(key, 0.0) + value
    return result


class SurveyState(BaseModel):
    """アンケート進行状態（不変スナップショット）"""

    model_config = ConfigDict(frozen=True)

    survey_scores: dict[str, float] = Field(default_factory=dict, description="属性キー → 累積重み")
    current_question_index: int = Field(default=0, ge=0, description="現在の質問番号（0始まり）")
    korean_level: KoreanLevel = Field(default=KoreanLevel.NONE, description="韓国語レベル")
    prefer_japanese_support: bool = Field(default=True, description="日本語対応を優先するか")

    def answer(self, option: QuestionOption) -> SurveyState:
        """単一選択の回答. score_key に score_value を加点して次の質問へ"""
        return self._advance({option.score_key: option.score_value})

    def answer_multi(self, question: Question, selected_ids: Iterable[str]) -> SurveyState:
        """複数選択の回答

        Args:
            question: 回答対象の質問
            selected_ids: 選択した選択肢ID（QuestionOption.option_id）

        Raises:
            InvalidSelectionError: 選択数が min_select 未満、または max_select 超過
        """
        selected = set(selected_ids)
        chosen = [
            option
            for index, option in enumerate(question.options)
            if option.option_id(index) in selected
        ]
        if len(chosen) < question.min_select:
            raise InvalidSelectionError(
                f"{question.id}: {question.min_select}件以上選択してください（{len(chosen)}件）"
            )
        if len(chosen) > question.effective_max_select:
            raise InvalidSelectionError(
                f"{question.id}: 選択できるのは{question.effective_max_select}件までです"
                f"（{len(chosen)}件）"
            )
        return self._advance(merge_option_scores(chosen))

    def skip(self) -> SurveyState:
        """加点せずに次の質問へ"""
        return self._advance({})

    def with_language(
        self,
        korean_level: KoreanLevel,
        prefer_japanese_support: bool | None = None,
    ) -> SurveyState:
        """言語設定を変更した状態を返す"""
        update: dict[str, object] = {"korean_level": korean_level}
        if prefer_japanese_support is not None:
            update["prefer_japanese_support"] = prefer_japanese_support
        return self.model_copy(update=update)

    def is_complete(self, total_questions: int) -> bool:
        return self.current_question_index >= total_questions

    def _advance(self, delta: Mapping[str, float]) -> SurveyState:
        logger.debug("回答 #%d: %s", self.current_question_index + 1, dict(delta))
        return self.model_copy(
            update={
                "survey_scores": _add_scores(self.survey_scores, delta),
                "current_question_index": self.current_question_index + 1,
            }
        )
