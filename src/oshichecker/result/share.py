"""診断結果の分割とシェア用テキスト生成"""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import quote

from oshichecker.core.i18n import localized_name
from oshichecker.core.models import RESULT_COUNT, CandidateMember, Group, Locale

TWEET_INTENT_URL = "https://twitter.com/intent/tweet"

RANK_EMOJIS = ("👑", "🥈", "🥉")

_INTROS: dict[Locale, str] = {
    Locale.JA: "推しチェッカーで診断したら…",
    Locale.KO: "오시체커로 진단했더니...",
    Locale.EN: "My Oshi Checker results...",
}

_RANK_LABELS: dict[Locale, tuple[str, str, str]] = {
    Locale.JA: ("1位", "2位", "3位"),
    Locale.KO: ("1위", "2위", "3위"),
    Locale.EN: ("1st", "2nd", "3rd"),
}

_HASHTAGS: dict[Locale, str] = {
    Locale.JA: "#推しチェッカー #韓国地下アイドル #推し診断",
    Locale.KO: "#오시체커 #한국인디아이돌 #최애진단",
    Locale.EN: "#OshiChecker #KUndergroundIdol #BiasDiagnosis",
}


def _locale(locale: Locale | str) -> Locale:
    try:
        return Locale(locale)
    except ValueError:
        return Locale.JA


def split_result(
    ranked: Sequence[CandidateMember],
    result_count: int = RESULT_COUNT,
) -> tuple[list[CandidateMember], list[CandidateMember]]:
    """ランキングを上位（TOP3）とそれ以外（4位以降）に分ける"""
    return list(ranked[:result_count]), list(ranked[result_count:])


def build_share_text(
    top_members: Sequence[CandidateMember],
    groups: Sequence[Group],
    locale: Locale | str,
    site_url: str,
) -> str:
    """シェア用テキストを生成する

    上位3名まで「絵文字 順位: 名前（グループ名）」の形式で並べる。
    グループが見つからない場合は括弧ごと省略する。
    """
    loc = _locale(locale)
    groups_by_id = {group.id: group for group in groups}

    lines = []
    for index, candidate in enumerate(top_members[: len(RANK_EMOJIS)]):
        member_name = localized_name(candidate.member, loc)
        group = groups_by_id.get(candidate.member.group_id)
        group_part = f"（{localized_name(group, loc)}）" if group else ""
        lines.append(f"{RANK_EMOJIS[index]} {_RANK_LABELS[loc][index]}: {member_name}{group_part}")

    results = "\n".join(lines)
    return f"{_INTROS[loc]}\n\n{results}\n\n{_HASHTAGS[loc]}\n{site_url}"


def share_intent_url(text: str) -> str:
    """X（Twitter）の投稿インテントURL"""
    encoded = quote(text, safe="!~*'()")
    return f"{TWEET_INTENT_URL}?text={encoded}"
