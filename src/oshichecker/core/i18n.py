"""ローカライズ文字列の解決"""

from __future__ import annotations

from .models import PRIMARY_LOCALE, Group, LocalizedText, Locale, Member

_LOCALE_KEYS = frozenset(locale.value for locale in Locale)


def localized_text(text: LocalizedText, locale: Locale | str) -> str:
    """指定ロケールの文字列を返す

    未定義・空文字の場合は日本語（プライマリロケール）にフォールバックする。
    """
    key = str(locale)
    value = getattr(text, key, None) if key in _LOCALE_KEYS else None
    if value:
        return value
    return getattr(text, PRIMARY_LOCALE.value)


def localized_name(entity: Member | Group, locale: Locale | str) -> str:
    """メンバー・グループの表示名"""
    return localized_text(entity.name, locale)
