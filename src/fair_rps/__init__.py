"""
公平石头剪刀布
Fair Rock Paper Scissors - 任意奇数个招式，HMAC 承诺可校验
"""
from .app import Application
from .game import GameSession, MoveSet, Outcome, WinnerResolver, FairnessProtocol

__version__ = "1.0.0"

__all__ = [
    'Application',
    'GameSession',
    'MoveSet',
    'Outcome',
    'WinnerResolver',
    'FairnessProtocol'
]
