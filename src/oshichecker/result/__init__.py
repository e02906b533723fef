"""診断結果パッケージ"""

from .share import (
    RANK_EMOJIS,
    TWEET_INTENT_URL,
    build_share_text,
    share_intent_url,
    split_result,
)

__all__ = [
    "RANK_EMOJIS",
    "TWEET_INTENT_URL",
    "build_share_text",
    "share_intent_url",
    "split_result",
]
