"""Oshi Checker — コアデータモデル.

- Locale / KoreanLevel / JpSupportLevel: 列挙型
- LocalizedText: ja / ko / en のローカライズ文字列
- Member / Group: 静的な参照データ（セッション中は不変）
- CandidateMember: アンケート → バトル → 最終ランキングへ受け渡されるスコア記録
- BattleRecord: バトル1回分の対戦結果
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

#: アンケート後の候補プール人数（最終ランキングの上限も兼ねる）
CANDIDATE_COUNT: int = 8

#: 結果画面で強調表示する上位人数（<= CANDIDATE_COUNT）
RESULT_COUNT: int = 3


class Locale(StrEnum):
    """表示ロケール."""

    JA = "ja"
    KO = "ko"
    EN = "en"


#: ラベル・名前のフォールバック先
PRIMARY_LOCALE = Locale.JA


class KoreanLevel(StrEnum):
    """ユーザー自己申告の韓国語レベル（低い順）."""

    NONE = "none"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    NATIVE = "native"


class JpSupportLevel(StrEnum):
    """メンバーの日本語対応レベル."""

    OK = "ok"
    SOME = "some"
    UNKNOWN = "unknown"
    NO = "no"


class _CamelModel(BaseModel):
    """JSON は camelCase、Python 側は snake_case で扱う共通基底."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LocalizedText(_CamelModel):
    """ロケール別の文字列. ja は必須."""

    ja: str = Field(..., description="日本語")
    ko: str | None = Field(default=None, description="韓国語")
    en: str | None = Field(default=None, description="英語")


class Group(_CamelModel):
    """アイドルグループ."""

    id: str = Field(..., min_length=1, description="グループID")
    name: LocalizedText = Field(..., description="グループ名")


class Member(_CamelModel):
    """アイドルグループのメンバー.

    scores は属性キー → 親和度。covers は「カバー/アーティスト系」の
    補助マッピングで、scores に無いキーのときだけ参照される。
    """

    id: str = Field(..., min_length=1, description="メンバーID")
    group_id: str = Field(..., description="所属グループID")
    name: LocalizedText = Field(..., description="表示名")
    scores: dict[str, float] = Field(default_factory=dict, description="属性キー → 親和度")
    covers: dict[str, float] | None = Field(default=None, description="カバー系属性の親和度")
    jp_support: JpSupportLevel = Field(
        default=JpSupportLevel.UNKNOWN, description="日本語対応レベル"
    )

    def affinity(self, key: str) -> float:
        """属性キーの親和度. scores → covers → 0 の順で引く."""
        if key in self.scores:
            return self.scores[key]
        if self.covers and key in self.covers:
            return self.covers[key]
        return 0.0


class CandidateMember(_CamelModel):
    """候補メンバーのスコア記録.

    survey_score はアンケート集計時に確定する。appearance_count / win_count は
    バトル側が新しいスナップショットとして更新し、preference_score /
    language_bonus / final_score は最終ランキングでのみ算出される。
    """

    member: Member
    survey_score: float = Field(default=0.0, description="アンケートスコア")
    appearance_count: int = Field(default=0, ge=0, description="バトル登場回数")
    win_count: int = Field(default=0, ge=0, description="バトル勝利数")
    preference_score: float = Field(default=0.0, description="survey_score + win_count")
    language_bonus: float = Field(default=0.0, description="言語ボーナス")
    final_score: float = Field(default=0.0, description="preference_score + language_bonus")

    @property
    def member_id(self) -> str:
        return self.member.id


class BattleRecord(_CamelModel):
    """1回分の対戦結果. member_a / member_b の順序に意味は無い."""

    member_a: str = Field(..., description="対戦メンバーA")
    member_b: str = Field(..., description="対戦メンバーB")
    winner_id: str = Field(..., description="勝者のメンバーID")

    @model_validator(mode="after")
    def _winner_in_pair(self) -> BattleRecord:
        if self.winner_id not in (self.member_a, self.member_b):
            raise ValueError(
                f"winner_id '{self.winner_id}' は対戦ペア "
                f"({self.member_a}, {self.member_b}) に含まれていません"
            )
        return self

    def involves(self, first: str, second: str) -> bool:
        """この記録が {first, second} の対戦か."""
        return {self.member_a, self.member_b} == {first, second}
