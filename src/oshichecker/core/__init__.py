"""Oshi Checker コアモジュール"""

from .config import OshiCheckerSettings, get_settings, reload_settings
from .errors import (
    CatalogLoadError,
    InvalidBattleError,
    InvalidSelectionError,
    OshiCheckerError,
)
from .i18n import localized_name, localized_text
from .models import (
    CANDIDATE_COUNT,
    PRIMARY_LOCALE,
    RESULT_COUNT,
    BattleRecord,
    CandidateMember,
    Group,
    JpSupportLevel,
    KoreanLevel,
    Locale,
    LocalizedText,
    Member,
)

__all__ = [
    "BattleRecord",
    "CANDIDATE_COUNT",
    "CandidateMember",
    "CatalogLoadError",
    "Group",
    "InvalidBattleError",
    "InvalidSelectionError",
    "JpSupportLevel",
    "KoreanLevel",
    "Locale",
    "LocalizedText",
    "Member",
    "OshiCheckerError",
    "OshiCheckerSettings",
    "PRIMARY_LOCALE",
    "RESULT_COUNT",
    "get_settings",
    "localized_name",
    "localized_text",
    "reload_settings",
]
