"""属性カタログ — スコアリング軸（属性キー）のレジストリ

属性キーは genre / vibe / performance / meet の4カテゴリに固定で分類され、
カテゴリごとに表示色を持つ。カタログは一度構築したら読み取り専用で、
ロケールやテストごとに独立したインスタンスを作れる。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from oshichecker.core.i18n import localized_text
from oshichecker.core.models import Locale, LocalizedText


class AttributeCategory(StrEnum):
    """属性カテゴリ"""

    GENRE = "genre"
    VIBE = "vibe"
    PERFORMANCE = "performance"
    MEET = "meet"


class AttributeDefinition(BaseModel):
    """属性キー1件の定義"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="属性キー")
    category: AttributeCategory = Field(..., description="カテゴリ")
    label: LocalizedText = Field(..., description="表示ラベル")


#: カテゴリ別の表示色
CATEGORY_COLORS: dict[AttributeCategory, str] = {
    AttributeCategory.GENRE: "#8b5cf6",  # パープル
    AttributeCategory.VIBE: "#ec4899",  # ピンク
    AttributeCategory.PERFORMANCE: "#22c55e",  # グリーン
    AttributeCategory.MEET: "#f59e0b",  # オレンジ
}

#: 未知キーの表示色
DEFAULT_COLOR = "#9ca3af"


def _define(
    key: str, category: AttributeCategory, ja: str, ko: str, en: str
) -> AttributeDefinition:
    return AttributeDefinition(
        key=key, category=category, label=LocalizedText(ja=ja, ko=ko, en=en)
    )


_G = AttributeCategory.GENRE
_V = AttributeCategory.VIBE
_P = AttributeCategory.PERFORMANCE
_M = AttributeCategory.MEET

#: 既定の属性定義（表示順）
ATTRIBUTE_DEFINITIONS: tuple[AttributeDefinition, ...] = (
    # genre
    _define("genre_orthodox", _G, "王道", "정통", "Orthodox"),
    _define("genre_denpa", _G, "電波", "뎀파", "Denpa"),
    _define("genre_loud", _G, "ラウド", "라우드", "Loud"),
    _define("genre_alt", _G, "オルタナ", "얼터너티브", "Alternative"),
    _define("genre_dark", _G, "ダーク", "다크", "Dark"),
    _define("genre_gothic", _G, "ゴシック", "고딕", "Gothic"),
    _define("genre_cyber", _G, "サイバー", "사이버", "Cyber"),
    _define("genre_magical", _G, "マジカル", "마법", "Magical"),
    _define("genre_yami", _G, "病み", "야미", "Yami"),
    # vibe
    _define("cute", _V, "キュート", "큐트", "Cute"),
    _define("squirrel", _V, "リス系", "다람쥐상", "Squirrel-like"),
    _define("cool", _V, "クール", "쿨", "Cool"),
    _define("pure", _V, "ピュア", "퓨어", "Pure"),
    _define("sexy", _V, "セクシー", "섹시", "Sexy"),
    _define("elegant", _V, "エレガント", "엘레강스", "Elegant"),
    _define("healing", _V, "癒し", "치유", "Healing"),
    _define("youthful", _V, "フレッシュ", "상큼", "Fresh"),
    _define("mysterious", _V, "ミステリアス", "미스테리", "Mysterious"),
    _define("unique", _V, "個性派", "개성파", "Unique"),
    _define("idol_kpop", _V, "K-POPアイドル", "K-POP 아이돌", "K-POP idol"),
    _define("idol_polished", _V, "洗練アイドル", "세련 아이돌", "Polished idol"),
    # face（vibe扱い）
    _define("face_cat", _V, "猫顔", "고양이상", "Cat face"),
    _define("face_dog", _V, "子犬顔", "강아지상", "Puppy face"),
    _define("face_rabbit", _V, "ウサギ顔", "토끼상", "Bunny face"),
    _define("face_raccoon_dog", _V, "タヌキ顔", "너구리상", "Raccoon face"),
    _define("face_fox", _V, "キツネ顔", "여우상", "Fox face"),
    _define("face_squirrel", _V, "リス顔", "다람쥐상", "Squirrel face"),
    _define("face_chick", _V, "ひよこ顔", "병아리상", "Chick face"),
    _define("face_bird", _V, "小鳥顔", "작은 새상", "Birdlike face"),
    # performance
    _define("dance", _P, "ダンス", "댄스", "Dance"),
    _define("vocal", _P, "ボーカル", "보컬", "Vocal"),
    _define("expression", _P, "表現力", "표현력", "Expression"),
    _define("energy", _P, "エナジー", "에너지", "Energy"),
    _define("stability", _P, "安定感", "안정감", "Stability"),
    _define("growth", _P, "成長性", "성장성", "Growth"),
    _define("presence", _P, "存在感", "존재감", "Presence"),
    _define("facial", _P, "表情管理", "표정 관리", "Facial control"),
    _define("charisma", _P, "カリスマ", "카리스마", "Charisma"),
    # meet
    _define("comfort", _M, "安心感", "안심감", "Comfort"),
    _define("cheer", _M, "わくわく", "설렘", "Excitement"),
    _define("charming", _M, "愛嬌", "애교", "Charm"),
    _define("calm", _M, "穏やか", "온화함", "Calm"),
    _define("dry", _M, "ドライ", "쿨함", "Dry"),
    _define("kind", _M, "優しさ", "상냥함", "Kindness"),
    _define("talk", _M, "トーク力", "토크력", "Talk skill"),
    _define("recognition", _M, "認知", "인지도", "Recognition"),
    _define("closeness", _M, "距離感", "거리감", "Closeness"),
    _define("social", _M, "社交性", "사교성", "Sociability"),
    _define("gap", _M, "ツンデレ", "츤데레", "Tsundere"),
)


class AttributeCatalog:
    """属性キーの読み取り専用レジストリ

    ラベル・色の参照はすべて失敗しない。未登録キーはラベルとしてキー自体を、
    色としてニュートラルな既定色を返す。
    """

    def __init__(
        self,
        definitions: Iterable[AttributeDefinition] = ATTRIBUTE_DEFINITIONS,
        *,
        category_colors: Mapping[AttributeCategory, str] | None = None,
        default_color: str = DEFAULT_COLOR,
    ) -> None:
        """初期化

        Args:
            definitions: 属性定義（この順序が表示順になる）
            category_colors: カテゴリ → 表示色。Noneの場合は既定色
            default_color: 未知キーの表示色

        Raises:
            ValueError: 属性キーが重複している場合
        """
        self._definitions: dict[str, AttributeDefinition] = {}
        for definition in definitions:
            if definition.key in self._definitions:
                raise ValueError(f"属性キーが重複しています: {definition.key}")
            self._definitions[definition.key] = definition
        self._colors = dict(category_colors if category_colors is not None else CATEGORY_COLORS)
        self._default_color = default_color

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    @property
    def keys(self) -> tuple[str, ...]:
        """全属性キー（定義順）"""
        return tuple(self._definitions)

    @property
    def categories(self) -> dict[AttributeCategory, list[str]]:
        """カテゴリ → 属性キー（定義順）. 4カテゴリすべてを含む"""
        result: dict[AttributeCategory, list[str]] = {c: [] for c in AttributeCategory}
        for definition in self._definitions.values():
            result[definition.category].append(definition.key)
        return result

    def keys_in(self, category: AttributeCategory | str) -> list[str]:
        """指定カテゴリの属性キー"""
        return [d.key for d in self._definitions.values() if d.category == category]

    def is_valid_key(self, key: str) -> bool:
        """登録済みの属性キーか"""
        return key in self._definitions

    def category_of(self, key: str) -> AttributeCategory | None:
        definition = self._definitions.get(key)
        return definition.category if definition else None

    def label_of(self, key: str, locale: Locale | str) -> str:
        """ローカライズ済みラベル

        指定ロケールのラベルが無ければ日本語ラベル、未登録キーならキーそのもの。
        """
        definition = self._definitions.get(key)
        if definition is None:
            return key
        return localized_text(definition.label, locale)

    def color_of(self, key: str) -> str:
        """カテゴリの表示色. 未登録キーは既定色"""
        category = self.category_of(key)
        if category is None:
            return self._default_color
        return self._colors.get(category, self._default_color)


# 既定カタログ（遅延初期化）
_catalog: AttributeCatalog | None = None


def get_catalog() -> AttributeCatalog:
    """既定の属性カタログを取得"""
    global _catalog
    if _catalog is None:
        _catalog = AttributeCatalog()
    return _catalog
