from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Cell, Mark
from .history import History, append_snapshot, jump_to
from .moves import propose_move, turn_owner
from .rules import Line, Outcome, evaluate, winning_line
from .status import move_label, status_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One row of the move list shown next to the board."""
    index: int
    label: str
    current: bool


class GameSession:
    """
    Owns the (history, position) pair and applies one transition per event.

    Everything else (board, turn, outcome, status) is derived on read.
    """

    def __init__(self, history: Optional[History] = None, position: Optional[int] = None) -> None:
        self.history: History = history if history is not None else History.initial()
        if position is None:
            position = len(self.history) - 1
        self.position: int = jump_to(self.history, position)

    @property
    def board(self) -> Board:
        return self.history[self.position]

    @property
    def turn(self) -> Mark:
        return turn_owner(self.position)

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board)

    @property
    def status(self) -> str:
        return status_message(self.board, self.position)

    @property
    def winning_line(self) -> Optional[Line]:
        return winning_line(self.board)

    def play(self, cell: Cell) -> bool:
        """Marks `cell` for the side to move. Returns False if the move was rejected."""
        next_board = propose_move(self.board, cell, self.turn)
        if next_board is None:
            logger.debug("rejected move at cell %d (position %d)", cell, self.position)
            return False
        self.history, self.position = append_snapshot(self.history, self.position, next_board)
        logger.debug("%s played cell %d; history length %d", next_board.at(cell), cell, len(self.history))
        return True

    def jump(self, index: int) -> bool:
        """Moves the current position to `index`. Returns False if it is out of range."""
        try:
            self.position = jump_to(self.history, index)
        except ValueError:
            logger.debug("rejected jump to %d (history length %d)", index, len(self.history))
            return False
        logger.debug("jumped to position %d", index)
        return True

    def reset(self) -> None:
        self.history = History.initial()
        self.position = 0

    def entries(self) -> List[HistoryEntry]:
        return [
            HistoryEntry(index=i, label=move_label(i), current=(i == self.position))
            for i in range(len(self.history))
        ]
