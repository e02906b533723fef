"""アンケート質問モデル"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oshichecker.core.models import LocalizedText


class QuestionType(StrEnum):
    """質問タイプ"""

    SINGLE = "single"
    MULTI = "multi"


class QuestionOption(BaseModel):
    """選択肢

    単一の score_key / score_value に加点するか、scores で複数キーに加点する。
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str | None = Field(default=None, description="選択肢ID")
    score_key: str = Field(..., description="加点する属性キー")
    score_value: float = Field(default=1.0, description="加点値")
    scores: dict[str, float] | None = Field(default=None, description="複数キーへの加点")
    label: LocalizedText | None = Field(default=None, description="表示ラベル")

    def option_id(self, index: int) -> str:
        """選択肢の識別子. id → score_key → インデックス の順"""
        return self.id or self.score_key or str(index)

    def score_map(self) -> dict[str, float]:
        """この選択肢が加点する属性キー → 値"""
        if self.scores is not None:
            return dict(self.scores)
        return {self.score_key: self.score_value}


class Question(BaseModel):
    """アンケートの質問"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1, description="質問ID")
    type: QuestionType = Field(default=QuestionType.SINGLE, description="質問タイプ")
    text: LocalizedText | None = Field(default=None, description="質問文")
    options: list[QuestionOption] = Field(default_factory=list, description="選択肢")
    min_select: int = Field(default=1, ge=0, description="最小選択数（複数選択）")
    max_select: int | None = Field(default=None, ge=1, description="最大選択数（複数選択）")

    @property
    def is_multi(self) -> bool:
        return self.type == QuestionType.MULTI

    @property
    def effective_max_select(self) -> int:
        """最大選択数. 未指定なら選択肢数（最低1）"""
        if self.max_select is not None:
            return self.max_select
        return max(len(self.options), 1)
