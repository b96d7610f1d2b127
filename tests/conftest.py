"""
测试公共组件
Shared Test Fixtures
"""
import pytest

from fair_rps.game import CryptoProvider, FairnessProtocol, GameSession, MoveSet

RPS = ["Rock", "Paper", "Scissors"]
RPSLS = ["Rock", "Paper", "Scissors", "Lizard", "Spock"]


class FixedMoveCrypto(CryptoProvider):
    """电脑招式固定的密码学组件，密钥与摘要仍为真实计算"""

    def __init__(self, index: int, algorithm: str = "sha3_256"):
        super().__init__(algorithm)
        self.index = index

    def uniform_int(self, low: int, high: int) -> int:
        return self.index


class RecordingUI:
    """记录所有输出的控制台替身"""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.digests = []
        self.menus = []
        self.help_tables = []
        self.results = []
        self.messages = []

    def show_message(self, text):
        self.messages.append(text)

    def show_digest(self, digest):
        self.digests.append(digest)

    def show_menu(self, entries):
        self.menus.append(list(entries))

    def prompt(self, text="Enter your move: "):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def show_help_table(self, move_set, matrix):
        self.help_tables.append((move_set, matrix))

    def show_result(self, result, verification_url):
        self.results.append((result, verification_url))


@pytest.fixture
def rpsls():
    return MoveSet.build(RPSLS)


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def make_session(rpsls, ui):
    def _make(computer_index=None, move_set=None):
        crypto = FixedMoveCrypto(computer_index) if computer_index else CryptoProvider()
        return GameSession(move_set or rpsls, protocol=FairnessProtocol(crypto=crypto), ui=ui)
    return _make
