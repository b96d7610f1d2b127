"""
应用程序主类
Application Main Class
"""
from typing import Any, Dict, Optional, Sequence
from .game import GameSession, GameState, MoveSet, ConsoleUI, CryptoProvider, FairnessProtocol
from .utils.config_loader import ConfigLoader
from .utils.error_handler import (
    ErrorHandler, global_error_handler, EXIT_OK, EXIT_USAGE, EXIT_INTERRUPTED
)
from .utils.exceptions import FairRPSException
from .utils.logger import setup_logger, setup_logger_from_config

logger = setup_logger("FairRPS.App")


class Application:
    """应用程序主类：加载配置、配置日志、组装并运行游戏会话"""

    def __init__(self,
                 config_path: Optional[str] = None,
                 log_level: Optional[str] = None,
                 ui: Optional[ConsoleUI] = None,
                 crypto: Optional[CryptoProvider] = None,
                 error_handler: Optional[ErrorHandler] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径，None 时使用 config/config.yaml 或内置默认值
            log_level: 覆盖配置中的日志级别
            ui: 控制台交互组件
            crypto: 密码学组件
            error_handler: 错误处理器
        """
        self.config_path = config_path
        self.log_level = log_level
        self.ui = ui or ConsoleUI()
        self.crypto = crypto
        self.error_handler = error_handler or global_error_handler
        self.config: Dict[str, Any] = {}
        self.session: Optional[GameSession] = None

    def _load_config(self):
        """加载配置并应用日志设置"""
        self.config = ConfigLoader.load_or_default(self.config_path)
        logging_config = dict(ConfigLoader.get_logging_config(self.config))
        if self.log_level:
            logging_config['level'] = self.log_level
        setup_logger_from_config(logging_config)
        logger.debug(f"当前配置: {self.config}")

    def _create_protocol(self) -> FairnessProtocol:
        fairness = ConfigLoader.get_fairness_config(self.config)
        crypto = self.crypto or CryptoProvider(algorithm=fairness['digest_algorithm'])
        return FairnessProtocol(crypto=crypto, key_length=fairness['key_length'])

    def _create_session(self, move_set: MoveSet) -> GameSession:
        game = ConfigLoader.get_game_config(self.config)
        fairness = ConfigLoader.get_fairness_config(self.config)
        return GameSession(
            move_set,
            protocol=self._create_protocol(),
            ui=self.ui,
            help_token=game['help_token'],
            exit_token=game['exit_token'],
            verification_url=fairness['verification_url']
        )

    def run(self, moves: Sequence[str]) -> int:
        """
        运行游戏

        Args:
            moves: 命令行提供的招式名称

        Returns:
            int: 进程退出码
        """
        try:
            self._load_config()
            # 参数校验先于任何密钥生成
            move_set = MoveSet.build(moves)
            self.session = self._create_session(move_set)

            rounds = ConfigLoader.get_game_config(self.config)['rounds']
            for round_number in range(1, rounds + 1):
                if round_number > 1:
                    self.ui.show_message("")
                    self.session.new_round()
                logger.info(f"第 {round_number}/{rounds} 回合")
                self.session.run()
                if self.session.state == GameState.ABORTED:
                    break
            return EXIT_OK

        except (KeyboardInterrupt, EOFError):
            if self.session is not None:
                self.session.abort()
            logger.info("用户中断程序")
            self.ui.show_message("\nGame interrupted. Goodbye!")
            return EXIT_INTERRUPTED
        except FairRPSException as e:
            return self.error_handler.handle(e, context="run")

    def verify(self, secret_key: str, move: str, digest: str) -> int:
        """
        本地校验揭示的密钥与招式是否与公布的 HMAC 一致

        Returns:
            int: 一致返回 0，否则返回 1
        """
        try:
            self._load_config()
            matches = self._create_protocol().verify(secret_key, move, digest)
        except FairRPSException as e:
            return self.error_handler.handle(e, context="verify")

        if matches:
            self.ui.show_message(f"HMAC matches: {move!r} was committed with this key.")
            return EXIT_OK
        self.ui.show_message(f"HMAC does NOT match {move!r} with this key.")
        return EXIT_USAGE
