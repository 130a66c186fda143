from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Mark, EMPTY

Line = Tuple[int, int, int]

# Scan order matters: a later winning line overwrites an earlier one.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board: undecided, a winning mark, or a draw."""
    winner: Optional[Mark] = None
    draw: bool = False

    @staticmethod
    def win(mark: Mark) -> 'Outcome':
        return Outcome(winner=mark, draw=False)

    @property
    def decided(self) -> bool:
        return self.winner is not None or self.draw


UNDECIDED = Outcome()
DRAW = Outcome(draw=True)


def winning_line(board: Board) -> Optional[Line]:
    """
    Returns the line that decides the game, if any.
    Every line is scanned; when several lines are complete the last one in
    WIN_LINES order is returned.
    """
    found: Optional[Line] = None
    for a, b, c in WIN_LINES:
        mark = board.cells[a]
        if mark != EMPTY and mark == board.cells[b] and mark == board.cells[c]:
            found = (a, b, c)
    return found


def evaluate(board: Board) -> Outcome:
    """Maps a board to its outcome. A win takes precedence over a full board."""
    line = winning_line(board)
    if line is not None:
        return Outcome.win(board.cells[line[0]])
    if board.is_full():
        return DRAW
    return UNDECIDED
