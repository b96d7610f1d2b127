"""
游戏模块
Game Module
"""
from .game_session import GameSession
from .game_logic import MoveSet, Outcome, WinnerResolver, RoundResult
from .fairness import CryptoProvider, Commitment, FairnessProtocol, Revelation
from .state_machine import GameState, GameStateMachine
from .console_ui import ConsoleUI

__all__ = [
    'GameSession',
    'MoveSet',
    'Outcome',
    'WinnerResolver',
    'RoundResult',
    'CryptoProvider',
    'Commitment',
    'FairnessProtocol',
    'Revelation',
    'GameState',
    'GameStateMachine',
    'ConsoleUI'
]
