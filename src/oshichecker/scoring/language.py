"""言語ボーナス — 韓国語レベル × 日本語対応レベル.

韓国語に自信がないユーザーほど、日本語対応（ok / some）のあるメンバーに
大きなボーナスを与える。advanced / native は常に 0。
"""

from __future__ import annotations

from oshichecker.core.models import JpSupportLevel, KoreanLevel

#: KoreanLevel → JpSupportLevel → ボーナス値
LANGUAGE_BONUS_TABLE: dict[KoreanLevel, dict[JpSupportLevel, float]] = {
    KoreanLevel.NONE: {
        JpSupportLevel.OK: 1.0,
        JpSupportLevel.SOME: 0.5,
        JpSupportLevel.UNKNOWN: 0.0,
        JpSupportLevel.NO: 0.0,
    },
    KoreanLevel.BEGINNER: {
        JpSupportLevel.OK: 1.0,
        JpSupportLevel.SOME: 0.5,
        JpSupportLevel.UNKNOWN: 0.0,
        JpSupportLevel.NO: 0.0,
    },
    KoreanLevel.INTERMEDIATE: {
        JpSupportLevel.OK: 0.5,
        JpSupportLevel.SOME: 0.3,
        JpSupportLevel.UNKNOWN: 0.0,
        JpSupportLevel.NO: 0.0,
    },
    KoreanLevel.ADVANCED: {
        JpSupportLevel.OK: 0.0,
        JpSupportLevel.SOME: 0.0,
        JpSupportLevel.UNKNOWN: 0.0,
        JpSupportLevel.NO: 0.0,
    },
    KoreanLevel.NATIVE: {
        JpSupportLevel.OK: 0.0,
        JpSupportLevel.SOME: 0.0,
        JpSupportLevel.UNKNOWN: 0.0,
        JpSupportLevel.NO: 0.0,
    },
}


def language_bonus(korean_level: KoreanLevel | str, jp_support: JpSupportLevel | str) -> float:
    """言語ボーナスを返す.

    未知の korean_level は none 行、未知の jp_support は 0 として扱う。
    """
    row = LANGUAGE_BONUS_TABLE.get(korean_level, LANGUAGE_BONUS_TABLE[KoreanLevel.NONE])
    return row.get(jp_support, 0.0)


def recommended_prefer_japanese_support(korean_level: KoreanLevel | str) -> bool:
    """日本語対応優先をおすすめするレベルか（none / beginner / intermediate）."""
    return korean_level in (KoreanLevel.NONE, KoreanLevel.BEGINNER, KoreanLevel.INTERMEDIATE)
