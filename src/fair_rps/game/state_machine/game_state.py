"""
会话状态枚举
Session State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """会话状态枚举"""
    CREATED = auto()           # 已创建，尚未承诺
    AWAITING_INPUT = auto()    # 已承诺，等待玩家输入
    RESOLVED = auto()          # 已判定并揭示
    ABORTED = auto()           # 玩家退出或中断

    def __str__(self):
        return self.name

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.RESOLVED, GameState.ABORTED)
