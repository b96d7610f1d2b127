"""
游戏逻辑模块
Game Logic Module
"""
from .move_set import MoveSet
from .game_rules import Outcome, WinnerResolver
from .round_result import RoundResult

__all__ = [
    'MoveSet',
    'Outcome',
    'WinnerResolver',
    'RoundResult'
]
