"""
控制台交互
Console User Interface
"""
import sys
from typing import List, Tuple, Optional, TextIO
import numpy as np
from tabulate import tabulate
from .game_logic.move_set import MoveSet
from .game_logic.round_result import RoundResult

HELP_CORNER = "v PC/User >"
CELL_TEXT = {1: "Win", -1: "Lose", 0: "Draw"}


class ConsoleUI:
    """菜单、提示输入、帮助表与结果输出"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _print(self, text: str = ""):
        print(text, file=self.stream or sys.stdout)

    def show_message(self, text: str):
        self._print(text)

    def show_digest(self, digest: str):
        self._print(f"HMAC: {digest}")

    def show_menu(self, entries: List[Tuple[str, str]]):
        """
        显示菜单

        Args:
            entries: (按键, 说明) 列表
        """
        self._print("Available moves:")
        for key, label in entries:
            self._print(f"{key} - {label}")

    def prompt(self, text: str = "Enter your move: ") -> str:
        return input(text)

    @staticmethod
    def render_help_table(move_set: MoveSet, matrix: np.ndarray) -> str:
        """
        渲染胜负表：行为电脑招式，列为玩家招式，单元格为电脑视角的结果

        Args:
            move_set: 招式集合
            matrix: WinnerResolver.dominance_matrix 的结果

        Returns:
            str: 表格文本
        """
        headers = [HELP_CORNER] + list(move_set.labels)
        rows = []
        for label, signs in zip(move_set.labels, matrix):
            rows.append([label] + [CELL_TEXT[int(sign)] for sign in signs])
        return tabulate(rows, headers=headers, tablefmt="grid")

    def show_help_table(self, move_set: MoveSet, matrix: np.ndarray):
        self._print(self.render_help_table(move_set, matrix))

    def show_result(self, result: RoundResult, verification_url: str):
        self._print(f"Your move: {result.user_move}")
        self._print(f"Computer move: {result.computer_move}")
        self._print(result.message)
        self._print(f"HMAC key: {result.revelation.secret_key}")
        self._print(f"To verify the HMAC, visit this link: {verification_url}")
