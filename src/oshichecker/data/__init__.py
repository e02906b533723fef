"""静的データ読み込みパッケージ"""

from .loader import (
    load_groups,
    load_members,
    load_questions,
    load_session,
    load_survey_scores,
)

__all__ = [
    "load_groups",
    "load_members",
    "load_questions",
    "load_session",
    "load_survey_scores",
]
