"""
错误处理工具模块
Error Handler Utility Module
"""
import sys
import traceback
from typing import Optional, Callable, TextIO
from .exceptions import (
    ValidationError, CryptoUnavailable, GameException, ConfigurationException
)
from .logger import setup_logger

logger = setup_logger("FairRPS.ErrorHandler")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CRYPTO = 2
EXIT_INTERRUPTED = 130


class ErrorHandler:
    """错误处理器类，记录致命错误、提示用户并给出退出码"""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        初始化错误处理器

        Args:
            stream: 面向用户的错误输出流，默认 sys.stderr
        """
        self.stream = stream
        self.error_callbacks: dict = {}
        self.setup_default_handlers()

    def setup_default_handlers(self):
        """设置默认错误处理函数"""
        self.error_callbacks[ValidationError] = self._handle_validation_error
        self.error_callbacks[CryptoUnavailable] = self._handle_crypto_error
        self.error_callbacks[GameException] = self._handle_game_error
        self.error_callbacks[ConfigurationException] = self._handle_config_error

    def register_handler(self, exception_type: type, handler: Callable[[Exception, Optional[str]], int]):
        """
        注册错误处理函数

        Args:
            exception_type: 异常类型
            handler: 处理函数，返回退出码
        """
        self.error_callbacks[exception_type] = handler
        logger.debug(f"注册错误处理函数: {exception_type.__name__}")

    def handle(self, exception: Exception, context: Optional[str] = None) -> int:
        """
        处理异常

        Args:
            exception: 异常对象
            context: 上下文信息

        Returns:
            int: 进程退出码
        """
        handler = None
        for exc_type, handler_func in self.error_callbacks.items():
            if isinstance(exception, exc_type):
                handler = handler_func
                break

        if handler is None:
            return self._handle_generic_error(exception, context)
        return handler(exception, context)

    def _emit(self, text: str):
        print(text, file=self.stream or sys.stderr)

    def _handle_validation_error(self, exception: ValidationError, context: Optional[str]) -> int:
        """处理招式参数错误"""
        logger.error(f"参数校验失败 [{exception.kind}, 数量: {exception.count}] ({context})")
        self._emit(f"Invalid arguments. {exception}")
        return EXIT_USAGE

    def _handle_crypto_error(self, exception: CryptoUnavailable, context: Optional[str]) -> int:
        """处理密码学组件错误"""
        logger.critical(f"密码学组件不可用 [{exception.operation}]: {exception.message}")
        self._emit(f"Cannot guarantee a fair round: {exception.message}")
        return EXIT_CRYPTO

    def _handle_game_error(self, exception: GameException, context: Optional[str]) -> int:
        """处理游戏逻辑错误"""
        logger.error(f"游戏逻辑错误 [状态: {exception.game_state}]: {exception.message}")
        self._emit(f"Game error: {exception.message}")
        return EXIT_USAGE

    def _handle_config_error(self, exception: ConfigurationException, context: Optional[str]) -> int:
        """处理配置错误"""
        logger.error(f"配置错误 [键: {exception.config_key}]: {exception.message}")
        self._emit(f"Configuration error: {exception.message}")
        return EXIT_USAGE

    def _handle_generic_error(self, exception: Exception, context: Optional[str]) -> int:
        """处理通用错误"""
        logger.error(f"未处理的异常: {type(exception).__name__}: {exception}")
        logger.debug(traceback.format_exc())
        self._emit(f"Unexpected error: {exception}")
        return EXIT_USAGE


# 全局错误处理器实例
global_error_handler = ErrorHandler()
