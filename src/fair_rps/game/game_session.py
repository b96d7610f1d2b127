"""
游戏会话
Game Session - 编排一回合：承诺、输入、判定、揭示
"""
from typing import Callable, Iterable, List, Optional, Tuple
from .state_machine import GameState, GameStateMachine
from .game_logic import MoveSet, WinnerResolver, RoundResult
from .fairness import Commitment, FairnessProtocol
from .console_ui import ConsoleUI
from ..utils.exceptions import CryptoUnavailable, GameException
from ..utils.logger import setup_logger

logger = setup_logger("FairRPS.GameSession")

DEFAULT_HELP_TOKEN = "?"
DEFAULT_EXIT_TOKEN = 0
DEFAULT_VERIFICATION_URL = "https://www.lddgo.net/en/encrypt/hmac"


class GameSession:
    """
    单回合游戏会话

    状态流转: CREATED -> AWAITING_INPUT -> RESOLVED 或 ABORTED。
    查看帮助不消耗回合；无效输入作废当前承诺并重新承诺。
    """

    def __init__(self,
                 move_set: MoveSet,
                 protocol: Optional[FairnessProtocol] = None,
                 ui: Optional[ConsoleUI] = None,
                 help_token: str = DEFAULT_HELP_TOKEN,
                 exit_token: int = DEFAULT_EXIT_TOKEN,
                 verification_url: str = DEFAULT_VERIFICATION_URL):
        """
        初始化游戏会话

        Args:
            move_set: 招式集合
            protocol: 公平性协议
            ui: 控制台交互组件
            help_token: 查看帮助的输入
            exit_token: 退出的输入
            verification_url: 提示玩家校验 HMAC 的链接
        """
        self.move_set = move_set
        self.protocol = protocol or FairnessProtocol()
        self.ui = ui or ConsoleUI()
        self.help_token = help_token
        self.exit_token = exit_token
        self.verification_url = verification_url

        self.state_machine = GameStateMachine(initial_state=GameState.CREATED)
        self.commitment: Optional[Commitment] = None
        self.result: Optional[RoundResult] = None
        self.commit_count = 0

    @classmethod
    def from_tokens(cls, raw_tokens: Iterable[str], **kwargs) -> "GameSession":
        """从原始招式参数创建会话；参数非法时抛出 ValidationError"""
        return cls(MoveSet.build(raw_tokens), **kwargs)

    @property
    def state(self) -> GameState:
        return self.state_machine.get_current_state()

    def menu_entries(self) -> List[Tuple[str, str]]:
        """招式菜单加上保留的退出与帮助项"""
        entries = [(str(index), label) for index, label in self.move_set]
        entries.append((str(self.exit_token), "exit"))
        entries.append((self.help_token, "help"))
        return entries

    def start(self):
        """
        开始回合：生成承诺、显示 HMAC 与菜单

        Raises:
            GameException: 会话不在 CREATED 状态
            CryptoUnavailable: 无法生成承诺，会话进入 ABORTED
        """
        if not self.state_machine.is_in_state(GameState.CREATED):
            raise GameException("Session already started", game_state=str(self.state))
        self._commit()
        self.state_machine.transition_to(GameState.AWAITING_INPUT)

    def _commit(self):
        """作废旧承诺后生成新承诺，任何时刻最多一个有效承诺"""
        if self.commitment is not None:
            self.commitment.discard()
            self.commitment = None

        try:
            self.commitment = self.protocol.commit(self.move_set)
        except CryptoUnavailable:
            logger.error("生成承诺失败，回合中止")
            self.state_machine.transition_to(GameState.ABORTED)
            raise

        self.commit_count += 1
        self.ui.show_digest(self.commitment.digest)
        self.ui.show_menu(self.menu_entries())

    @staticmethod
    def _parse_choice(answer: str) -> Optional[int]:
        try:
            return int(answer)
        except ValueError:
            return None

    def submit(self, raw_answer: str) -> Optional[RoundResult]:
        """
        处理玩家的一行输入

        Args:
            raw_answer: 原始输入

        Returns:
            Optional[RoundResult]: 判定完成时返回回合结果，否则 None

        Raises:
            GameException: 会话不在 AWAITING_INPUT 状态
        """
        if not self.state_machine.is_in_state(GameState.AWAITING_INPUT):
            raise GameException("Session is not awaiting input", game_state=str(self.state))

        answer = raw_answer.strip()

        if answer == self.help_token:
            logger.debug("显示帮助表")
            matrix = WinnerResolver.dominance_matrix(self.move_set.size())
            self.ui.show_help_table(self.move_set, matrix)
            self.state_machine.transition_to(GameState.AWAITING_INPUT)
            return None

        choice = self._parse_choice(answer)

        if choice is not None and choice == self.exit_token:
            logger.info("玩家选择退出")
            self.abort()
            return None

        if choice is None or not self.move_set.has_index(choice):
            logger.info(f"无效输入 {answer!r}，重新承诺")
            self._commit()
            self.state_machine.transition_to(GameState.AWAITING_INPUT)
            return None

        return self._resolve(choice)

    def _resolve(self, user_index: int) -> RoundResult:
        revelation = self.protocol.reveal(self.commitment)
        outcome = WinnerResolver.resolve(revelation.index, user_index, self.move_set.size())

        self.result = RoundResult(
            user_index=user_index,
            user_move=self.move_set.label_at(user_index),
            computer_index=revelation.index,
            computer_move=revelation.label,
            outcome=outcome,
            digest=self.commitment.digest,
            revelation=revelation
        )
        self.state_machine.transition_to(GameState.RESOLVED)
        logger.info(f"回合结束: {self.result.user_move} vs {self.result.computer_move} -> {outcome.name}")

        self.ui.show_result(self.result, self.verification_url)
        return self.result

    def abort(self):
        """中止会话，不揭示承诺"""
        if self.state.is_terminal:
            return
        if self.commitment is not None:
            self.commitment.discard()
        self.state_machine.transition_to(GameState.ABORTED)

    def run(self, read_answer: Optional[Callable[[], str]] = None) -> Optional[RoundResult]:
        """
        运行回合直到判定或退出

        Args:
            read_answer: 读取一行输入的函数，默认 ui.prompt

        Returns:
            Optional[RoundResult]: 判定结果，退出时为 None
        """
        if self.state_machine.is_in_state(GameState.CREATED):
            self.start()

        read = read_answer or self.ui.prompt
        while self.state_machine.is_in_state(GameState.AWAITING_INPUT):
            self.submit(read())
        return self.result

    def new_round(self):
        """已结束的会话重新开始一回合"""
        if not self.state.is_terminal:
            raise GameException("Current round is still in progress", game_state=str(self.state))
        self.commitment = None
        self.result = None
        self.state_machine.reset(GameState.CREATED)
        self.start()
