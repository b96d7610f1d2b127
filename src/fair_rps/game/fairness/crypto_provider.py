"""
密码学组件
Cryptographic Operations Provider
"""
import hmac
import secrets
from typing import Union
from ...utils.exceptions import CryptoUnavailable
from ...utils.logger import setup_logger

logger = setup_logger("FairRPS.CryptoProvider")

DEFAULT_ALGORITHM = "sha3_256"


class CryptoProvider:
    """安全随机数与 HMAC 计算，失败统一抛出 CryptoUnavailable"""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        """
        Args:
            algorithm: hashlib 支持的摘要算法名称
        """
        self.algorithm = algorithm

    def random_bytes(self, length: int) -> bytes:
        """生成 length 字节的安全随机数"""
        try:
            return secrets.token_bytes(length)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"安全随机源不可用: {e}")
            raise CryptoUnavailable(f"secure random source failed: {e}",
                                    operation="random_bytes") from e

    def uniform_int(self, low: int, high: int) -> int:
        """在闭区间 [low, high] 内均匀选取整数"""
        if high < low:
            raise ValueError(f"empty range {low}..{high}")
        try:
            return low + secrets.randbelow(high - low + 1)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"安全随机源不可用: {e}")
            raise CryptoUnavailable(f"secure random source failed: {e}",
                                    operation="uniform_int") from e

    def keyed_digest(self, key: Union[str, bytes], message: str) -> str:
        """
        计算 HMAC 十六进制摘要

        字符串形式的密钥按原文（十六进制文本）参与计算，
        与在线 HMAC 工具中直接粘贴密钥的结果一致。

        Args:
            key: 密钥
            message: 消息（招式名称）

        Returns:
            str: 小写十六进制摘要
        """
        key_bytes = key.encode('utf-8') if isinstance(key, str) else key
        try:
            return hmac.new(key_bytes, message.encode('utf-8'), self.algorithm).hexdigest()
        except ValueError as e:
            logger.critical(f"摘要算法不可用: {self.algorithm}")
            raise CryptoUnavailable(f"digest algorithm {self.algorithm!r} unavailable: {e}",
                                    operation="keyed_digest") from e
