"""アンケートパッケージ

質問・選択肢モデルと、回答を属性別の重みに累積する SurveyState。
"""

from .models import Question, QuestionOption, QuestionType
from .state import SurveyState, merge_option_scores

__all__ = [
    "Question",
    "QuestionOption",
    "QuestionType",
    "SurveyState",
    "merge_option_scores",
]
