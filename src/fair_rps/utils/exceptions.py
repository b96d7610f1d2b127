"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional

INVALID_CARDINALITY = "InvalidCardinality"


class FairRPSException(Exception):
    """所有游戏异常的基类"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FairRPSException):
    """招式参数校验异常（回合开始前即失败，不生成任何承诺）"""

    USAGE_EXAMPLE = (
        'Please provide an odd number (>= 3) of distinct strings as moves '
        '(e.g. "Rock Paper Scissors" or "Rock Paper Scissors Lizard Spock").'
    )

    def __init__(self, message: str, kind: str = INVALID_CARDINALITY,
                 count: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.count = count

    def __str__(self):
        return f"{self.message} {self.USAGE_EXAMPLE}"


class CryptoUnavailable(FairRPSException):
    """随机源或摘要函数不可用，公平性无法保证"""
    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class GameException(FairRPSException):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state


class ConfigurationException(FairRPSException):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
