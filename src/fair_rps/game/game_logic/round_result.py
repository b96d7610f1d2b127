"""
回合结果
Round Result
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from .game_rules import Outcome

if TYPE_CHECKING:
    from ..fairness.commitment import Revelation

OUTCOME_MESSAGES = {
    Outcome.FIRST_WINS: "PC wins!",
    Outcome.SECOND_WINS: "You win!",
    Outcome.DRAW: "It's a tie!",
}


@dataclass(frozen=True)
class RoundResult:
    """回合结果数据类（电脑为第一方，玩家为第二方）"""
    user_index: int
    user_move: str
    computer_index: int
    computer_move: str
    outcome: Outcome
    digest: str
    revelation: "Revelation"
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def message(self) -> str:
        """面向玩家的结果文字"""
        return OUTCOME_MESSAGES[self.outcome]

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'user_index': self.user_index,
            'user_move': self.user_move,
            'computer_index': self.computer_index,
            'computer_move': self.computer_move,
            'outcome': self.outcome.name,
            'message': self.message,
            'hmac': self.digest,
            'secret_key': self.revelation.secret_key,
            'timestamp': self.timestamp.isoformat()
        }
