"""Oshi Checker CLI

コマンドラインインターフェース。
"""

import argparse
import logging
import sys

from .attributes import AttributeCategory
from .core.models import KoreanLevel, Locale


def main():
    """メインエントリーポイント"""
    parser = argparse.ArgumentParser(
        description="Oshi Checker - アンケートと対決で推しメンバーを診断",
        prog="oshichecker",
    )
    parser.add_argument("--config", help="設定ファイル（oshichecker.config.yaml）のパス")

    subparsers = parser.add_subparsers(dest="command", help="利用可能なコマンド")

    # attributes コマンド
    attributes_parser = subparsers.add_parser("attributes", help="属性カタログを表示")
    attributes_parser.add_argument(
        "--locale", choices=[loc.value for loc in Locale], help="表示ロケール"
    )
    attributes_parser.add_argument(
        "--category",
        choices=[category.value for category in AttributeCategory],
        help="カテゴリで絞り込み",
    )

    # survey コマンド
    survey_parser = subparsers.add_parser("survey", help="アンケート結果から候補プールを算出")
    survey_parser.add_argument("--members", required=True, help="メンバーデータ（JSON/YAML）")
    survey_parser.add_argument("--answers", required=True, help="属性別の重み（JSON/YAML）")
    survey_parser.add_argument("--count", type=int, help="候補人数（既定: 設定値）")

    # rank コマンド
    rank_parser = subparsers.add_parser("rank", help="バトル結果から最終ランキングを算出")
    rank_parser.add_argument("--members", required=True, help="メンバーデータ（JSON/YAML）")
    rank_parser.add_argument("--session", required=True, help="セッション（候補と対戦記録）")
    rank_parser.add_argument("--groups", help="グループデータ（JSON/YAML）")
    rank_parser.add_argument(
        "--korean-level",
        choices=[level.value for level in KoreanLevel],
        help="韓国語レベル（既定: 設定値）",
    )
    rank_parser.add_argument(
        "--no-prefer-jp",
        action="store_true",
        help="日本語対応ボーナスを無効化",
    )
    rank_parser.add_argument(
        "--locale", choices=[loc.value for loc in Locale], help="表示ロケール"
    )

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.config)

    if args.command == "attributes":
        run_attributes(args)
    elif args.command == "survey":
        run_survey(args)
    elif args.command == "rank":
        run_rank(args)


def setup_logging(config_path=None):
    """設定を読み込み、ルートロガーのレベルを設定"""
    from .core import get_settings, reload_settings

    settings = reload_settings(config_path) if config_path else get_settings()
    logging.basicConfig(
        level=settings.logging.level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    return settings


def run_attributes(args):
    """属性カタログを表示"""
    from .attributes import get_catalog
    from .core import get_settings

    settings = get_settings()
    locale = args.locale or settings.locale.default
    catalog = get_catalog()

    for category, keys in catalog.categories.items():
        if args.category and category != args.category:
            continue
        print(f"\n[{category.value}] {catalog.color_of(keys[0]) if keys else ''}")
        for key in keys:
            print(f"  {key:<20} {catalog.label_of(key, locale)}")


def run_survey(args):
    """アンケート結果から候補プールを表示"""
    from .core import CatalogLoadError, get_settings, localized_name
    from .data import load_members, load_survey_scores
    from .scoring import SurveyScorer

    settings = get_settings()
    try:
        members = load_members(args.members)
        survey_scores = load_survey_scores(args.answers)
    except CatalogLoadError as e:
        print(f"❌ エラー: {e}")
        sys.exit(1)

    scorer = SurveyScorer(candidate_count=settings.scoring.candidate_count)
    pool = scorer.top_n(scorer.score(members, survey_scores), args.count)

    print(f"候補プール（{len(pool)}名）:")
    for index, candidate in enumerate(pool, start=1):
        name = localized_name(candidate.member, settings.locale.default)
        print(f"  {index:>2}. {candidate.member_id:<16} {name:<16} {candidate.survey_score:g}")


def run_rank(args):
    """最終ランキングとシェア用テキストを表示"""
    from .core import CatalogLoadError, get_settings, localized_name
    from .data import load_groups, load_members, load_session
    from .result import build_share_text, split_result
    from .scoring import FinalRanker

    settings = get_settings()
    locale = args.locale or settings.locale.default
    korean_level = args.korean_level or settings.language.default_korean_level
    prefer = settings.language.prefer_japanese_support and not args.no_prefer_jp

    try:
        members = load_members(args.members)
        state = load_session(args.session, members)
        groups = load_groups(args.groups) if args.groups else []
    except CatalogLoadError as e:
        print(f"❌ エラー: {e}")
        sys.exit(1)

    ranker = FinalRanker(candidate_count=settings.scoring.candidate_count)
    ranked = state.rank(ranker, korean_level=korean_level, prefer_japanese_support=prefer)
    top, rest = split_result(ranked, settings.scoring.result_count)

    print("=== あなたの推し ===")
    for index, candidate in enumerate(top, start=1):
        print(_format_rank_line(index, candidate, localized_name(candidate.member, locale)))
    if rest:
        print("\n--- 最終候補 ---")
        for index, candidate in enumerate(rest, start=len(top) + 1):
            print(_format_rank_line(index, candidate, localized_name(candidate.member, locale)))

    print("\n--- シェア ---")
    print(build_share_text(top, groups, locale, settings.share.site_url))


def _format_rank_line(index, candidate, name):
    return (
        f"  {index:>2}. {name} [{candidate.member_id}] "
        f"final={candidate.final_score:g} "
        f"(survey={candidate.survey_score:g} wins={candidate.win_count} "
        f"bonus={candidate.language_bonus:g})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
