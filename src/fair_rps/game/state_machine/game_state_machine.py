"""
会话状态机
Session State Machine
"""
from typing import Optional, Dict, List
from .game_state import GameState
from ...utils.logger import setup_logger

logger = setup_logger("FairRPS.GameStateMachine")


class GameStateMachine:
    """会话状态机类"""

    # 状态转换规则；AWAITING_INPUT 自转换对应查看帮助或输入无效后重新承诺
    VALID_TRANSITIONS: Dict[GameState, List[GameState]] = {
        GameState.CREATED: [GameState.AWAITING_INPUT, GameState.ABORTED],
        GameState.AWAITING_INPUT: [GameState.AWAITING_INPUT, GameState.RESOLVED, GameState.ABORTED],
        GameState.RESOLVED: [],
        GameState.ABORTED: [],
    }

    def __init__(self, initial_state: GameState = GameState.CREATED):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.previous_state: Optional[GameState] = None

        logger.debug(f"会话状态机初始化，初始状态: {self.current_state}")

    def transition_to(self, new_state: GameState) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Returns:
            bool: 转换是否成功
        """
        if not self.can_transition_to(new_state):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        old_state = self.current_state
        self.previous_state = old_state
        self.current_state = new_state

        if old_state == new_state:
            logger.debug(f"状态未改变: {self.current_state}")
        else:
            logger.info(f"状态转换: {old_state} -> {new_state}")
        return True

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.current_state

    def get_previous_state(self) -> Optional[GameState]:
        """获取上一个状态"""
        return self.previous_state

    def can_transition_to(self, state: GameState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def reset(self, state: GameState = GameState.CREATED):
        """
        重置状态机

        Args:
            state: 重置后的状态
        """
        self.previous_state = self.current_state
        self.current_state = state
        logger.info(f"状态机已重置到: {state}")

    def is_in_state(self, state: GameState) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state
