"""Oshi Checker テスト設定"""

import pytest

from oshichecker.core.models import Group, LocalizedText


@pytest.fixture
def groups() -> list[Group]:
    """テスト用グループ一覧"""
    return [
        Group(id="g1", name=LocalizedText(ja="グループ1", ko="그룹1", en="Group One")),
        Group(id="g2", name=LocalizedText(ja="グループ2")),
    ]


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """設定シングルトンをテストごとにリセット"""
    monkeypatch.setattr("oshichecker.core.config._settings", None)
