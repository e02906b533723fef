"""属性カタログパッケージ

スコアリング軸となる属性キーと、そのカテゴリ・ラベル・表示色を提供する。
"""

from .catalog import (
    ATTRIBUTE_DEFINITIONS,
    CATEGORY_COLORS,
    DEFAULT_COLOR,
    AttributeCatalog,
    AttributeCategory,
    AttributeDefinition,
    get_catalog,
)

__all__ = [
    "ATTRIBUTE_DEFINITIONS",
    "AttributeCatalog",
    "AttributeCategory",
    "AttributeDefinition",
    "CATEGORY_COLORS",
    "DEFAULT_COLOR",
    "get_catalog",
]
