"""
游戏规则实现
Game Rules Implementation
"""
from enum import Enum
import numpy as np
from ...utils.logger import setup_logger

logger = setup_logger("FairRPS.GameRules")


class Outcome(Enum):
    """对局结果枚举（以第一个招式的视角）"""
    FIRST_WINS = 1     # 第一个招式获胜
    SECOND_WINS = -1   # 第二个招式获胜
    DRAW = 0           # 平局

    @classmethod
    def from_sign(cls, sign: int) -> "Outcome":
        return cls(int(np.sign(sign)))


class WinnerResolver:
    """
    环形克制规则

    招式排成长度为 n（奇数）的环，每个招式胜过它后面的 n//2 个招式，
    输给前面的 n//2 个招式。
    """

    @staticmethod
    def _check(n: int):
        if n < 3 or n % 2 == 0:
            raise ValueError(f"move count must be odd and >= 3, got {n}")

    @staticmethod
    def delta(a: int, b: int, n: int) -> int:
        """
        计算 a 相对 b 的有符号环形距离，范围 [-n//2, n//2]

        先加 n 再取模，保证余数非负。
        """
        half = n // 2
        return ((a - b + half + n) % n) - half

    @staticmethod
    def resolve(a: int, b: int, n: int) -> Outcome:
        """
        判断两个招式的胜负

        Args:
            a: 第一个招式下标（1..n）
            b: 第二个招式下标（1..n）
            n: 招式数量

        Returns:
            Outcome: 对局结果

        Raises:
            ValueError: n 非法或下标越界
        """
        WinnerResolver._check(n)
        for index in (a, b):
            if not 1 <= index <= n:
                raise ValueError(f"move index {index} outside 1..{n}")

        delta = WinnerResolver.delta(a, b, n)
        if delta < 0:
            outcome = Outcome.SECOND_WINS
        elif delta == 0:
            outcome = Outcome.DRAW
        else:
            outcome = Outcome.FIRST_WINS
        logger.debug(f"resolve({a}, {b}, {n}): delta={delta} -> {outcome.name}")
        return outcome

    @staticmethod
    def dominance_matrix(n: int) -> np.ndarray:
        """
        生成 n×n 胜负矩阵

        matrix[i, j] 为 resolve(i+1, j+1, n) 的符号：1 行胜，-1 列胜，0 平局。

        Args:
            n: 招式数量

        Returns:
            np.ndarray: 形状 (n, n) 的整数矩阵
        """
        WinnerResolver._check(n)
        half = n // 2
        indices = np.arange(1, n + 1)
        delta = ((indices[:, None] - indices[None, :] + half + n) % n) - half
        return np.sign(delta).astype(int)
