"""Oshi Checker 設定管理モジュール

Pydantic Settingsを使用した型安全な設定管理。
oshichecker.config.yaml と環境変数から設定を読み込む。
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import CANDIDATE_COUNT, RESULT_COUNT, KoreanLevel, Locale


class ScoringConfig(BaseModel):
    """スコアリング設定"""

    candidate_count: int = Field(
        default=CANDIDATE_COUNT, ge=1, description="候補プール人数（最終ランキング上限）"
    )
    result_count: int = Field(default=RESULT_COUNT, ge=1, description="上位として強調する人数")
    battle_rounds: int = Field(default=10, ge=1, description="バトルのラウンド数")

    @model_validator(mode="after")
    def _result_within_candidates(self) -> "ScoringConfig":
        if self.result_count > self.candidate_count:
            raise ValueError(
                f"result_count ({self.result_count}) は candidate_count "
                f"({self.candidate_count}) 以下である必要があります"
            )
        return self


class LanguageConfig(BaseModel):
    """言語ボーナス設定"""

    default_korean_level: KoreanLevel = Field(default=KoreanLevel.NONE)
    prefer_japanese_support: bool = Field(default=True, description="日本語対応を優先するか")


class ShareConfig(BaseModel):
    """シェア設定"""

    site_url: str = Field(default="https://oshichecker.example.com")


class LocaleConfig(BaseModel):
    """ロケール設定"""

    default: Locale = Field(default=Locale.JA)


class LoggingConfig(BaseModel):
    """ロギング設定"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class OshiCheckerSettings(BaseSettings):
    """Oshi Checker 全体設定

    設定の優先順位:
    1. 環境変数（OSHICHECKER_SCORING__CANDIDATE_COUNT など）
    2. oshichecker.config.yaml
    3. デフォルト値
    """

    model_config = SettingsConfigDict(
        env_prefix="OSHICHECKER_",
        env_nested_delimiter="__",
    )

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    language: LanguageConfig = Field(default_factory=LanguageConfig)
    share: ShareConfig = Field(default_factory=ShareConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path | str | None = None) -> "OshiCheckerSettings":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス。Noneの場合はデフォルトパスを探索

        Returns:
            OshiCheckerSettings インスタンス
        """
        if config_path is None:
            search_paths = [
                Path.cwd() / "oshichecker.config.yaml",
                Path.cwd() / "oshichecker.config.yml",
                Path.home() / ".oshichecker" / "config.yaml",
            ]
            for path in search_paths:
                if path.exists():
                    config_path = path
                    break

        if config_path and Path(config_path).exists():
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
            return cls.model_validate(yaml_config)

        return cls()


# グローバル設定インスタンス（遅延初期化）
_settings: OshiCheckerSettings | None = None


def get_settings() -> OshiCheckerSettings:
    """設定シングルトンを取得"""
    global _settings
    if _settings is None:
        _settings = OshiCheckerSettings.from_yaml()
    return _settings


def reload_settings(config_path: Path | str | None = None) -> OshiCheckerSettings:
    """設定を再読み込み"""
    global _settings
    _settings = OshiCheckerSettings.from_yaml(config_path)
    return _settings
