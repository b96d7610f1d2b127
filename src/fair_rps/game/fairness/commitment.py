"""
承诺-揭示公平性协议
Commit-Reveal Fairness Protocol
"""
import hmac
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
from .crypto_provider import CryptoProvider
from ...utils.exceptions import CryptoUnavailable, GameException
from ...utils.logger import setup_logger

if TYPE_CHECKING:
    from ..game_logic.move_set import MoveSet

logger = setup_logger("FairRPS.FairnessProtocol")

DEFAULT_KEY_LENGTH = 32

# 只有本模块持有，Commitment 凭它才能被打开
_REVEAL_CAPABILITY = object()


@dataclass(frozen=True)
class Revelation:
    """揭示后的秘密：密钥（十六进制）、电脑招式下标与名称"""
    secret_key: str
    index: int
    label: str


class Commitment:
    """
    密封的承诺

    摘要在创建时即可公开；密钥和电脑招式只能通过
    FairnessProtocol.reveal 取得。
    """

    __slots__ = ('_digest', '_size', '_algorithm', '_sealed', '_revealed', '_discarded')

    def __init__(self, digest: str, size: int, algorithm: str,
                 sealed: Revelation, capability: object):
        if capability is not _REVEAL_CAPABILITY:
            raise TypeError("Commitment objects are created by FairnessProtocol.commit")
        self._digest = digest
        self._size = size
        self._algorithm = algorithm
        self._sealed = sealed
        self._revealed = False
        self._discarded = False

    @property
    def digest(self) -> str:
        return self._digest

    @property
    def size(self) -> int:
        return self._size

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def revealed(self) -> bool:
        return self._revealed

    @property
    def discarded(self) -> bool:
        return self._discarded

    def discard(self):
        """作废承诺，之后不可再揭示"""
        self._discarded = True

    def _open(self, capability: object) -> Revelation:
        if capability is not _REVEAL_CAPABILITY:
            raise PermissionError("commitment is sealed")
        if self._discarded:
            raise GameException("Cannot reveal a discarded commitment")
        self._revealed = True
        return self._sealed

    def __repr__(self) -> str:
        state = "revealed" if self._revealed else "sealed"
        return f"Commitment(digest={self._digest!r}, {state})"


class FairnessProtocol:
    """生成承诺、揭示承诺与校验摘要"""

    def __init__(self, crypto: Optional[CryptoProvider] = None,
                 key_length: int = DEFAULT_KEY_LENGTH):
        """
        Args:
            crypto: 密码学组件，默认使用 CryptoProvider()
            key_length: 密钥字节数
        """
        self.crypto = crypto or CryptoProvider()
        self.key_length = key_length

    def commit(self, move_set: "MoveSet") -> Commitment:
        """
        为电脑招式生成新的承诺

        Args:
            move_set: 招式集合

        Returns:
            Commitment: 仅公开摘要的承诺

        Raises:
            CryptoUnavailable: 随机源或摘要函数失败
        """
        secret_key = self.crypto.random_bytes(self.key_length).hex()
        if len(secret_key) != self.key_length * 2:
            raise CryptoUnavailable("random source returned a short key", operation="random_bytes")

        n = move_set.size()
        index = self.crypto.uniform_int(1, n)
        if not move_set.has_index(index):
            raise CryptoUnavailable(f"random source returned {index} outside 1..{n}",
                                    operation="uniform_int")

        label = move_set.label_at(index)
        digest = self.crypto.keyed_digest(secret_key, label)
        logger.debug(f"新承诺已生成: HMAC={digest}")

        return Commitment(digest, n, self.crypto.algorithm,
                          Revelation(secret_key, index, label), _REVEAL_CAPABILITY)

    @staticmethod
    def reveal(commitment: Commitment) -> Revelation:
        """揭示承诺；重复调用返回相同内容"""
        revelation = commitment._open(_REVEAL_CAPABILITY)
        logger.debug(f"承诺已揭示: HMAC={commitment.digest}")
        return revelation

    def verify(self, secret_key: str, label: str, digest: str) -> bool:
        """
        用揭示的密钥与招式重新计算摘要并与公布的摘要比对

        Returns:
            bool: 摘要是否一致
        """
        expected = self.crypto.keyed_digest(secret_key.strip(), label)
        return hmac.compare_digest(expected.encode('ascii'),
                                   digest.strip().lower().encode('utf-8'))
