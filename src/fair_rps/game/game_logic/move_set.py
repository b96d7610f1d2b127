"""
招式集合
Move Set
"""
from typing import Dict, Iterable, Iterator, Tuple
from ...utils.exceptions import ValidationError, INVALID_CARDINALITY
from ...utils.logger import setup_logger

logger = setup_logger("FairRPS.MoveSet")

MIN_MOVES = 3


class MoveSet:
    """
    有序、去重、不可变的招式集合，下标从 1 开始

    输入顺序决定环形克制关系，因此保持原样，不排序。
    """

    __slots__ = ('_labels', '_index_by_label')

    def __init__(self, labels: Tuple[str, ...]):
        """
        Args:
            labels: 已去重且数量合法的招式名称
        """
        self._labels = tuple(labels)
        self._index_by_label: Dict[str, int] = {
            label: i for i, label in enumerate(self._labels, start=1)
        }

    @classmethod
    def build(cls, raw_tokens: Iterable[str]) -> "MoveSet":
        """
        从原始参数构建招式集合

        Args:
            raw_tokens: 命令行等外部来源提供的招式名称

        Returns:
            MoveSet: 招式集合

        Raises:
            ValidationError: 去重后数量小于3或为偶数
        """
        unique = []
        seen = set()
        for token in raw_tokens:
            label = str(token).strip()
            if not label or label in seen:
                continue
            seen.add(label)
            unique.append(label)

        count = len(unique)
        if count < MIN_MOVES or count % 2 == 0:
            logger.warning(f"招式数量非法: {count}")
            raise ValidationError(
                f"Got {count} distinct move(s).", kind=INVALID_CARDINALITY, count=count)

        logger.debug(f"招式集合: {unique}")
        return cls(tuple(unique))

    def size(self) -> int:
        """招式数量 N"""
        return len(self._labels)

    def label_at(self, index: int) -> str:
        """
        获取下标对应的招式名称

        Raises:
            KeyError: 下标不在 1..N 内
        """
        if not self.has_index(index):
            raise KeyError(index)
        return self._labels[index - 1]

    def index_of(self, label: str) -> int:
        """
        获取招式名称对应的下标

        Raises:
            KeyError: 未知招式
        """
        return self._index_by_label[label]

    def has_index(self, index: int) -> bool:
        return isinstance(index, int) and 1 <= index <= len(self._labels)

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(enumerate(self._labels, start=1))

    def __eq__(self, other) -> bool:
        if not isinstance(other, MoveSet):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"MoveSet({list(self._labels)!r})"
