"""バトルパッケージ — 候補プールの対戦結果を不変スナップショットで受け渡す"""

from .state import BattleState

__all__ = ["BattleState"]
