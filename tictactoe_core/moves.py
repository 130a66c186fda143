from __future__ import annotations

from typing import List, Optional

from .board import Board, Cell, Mark, X, O
from .rules import evaluate


def turn_owner(position: int) -> Mark:
    """X moves on even positions (position 0 is the empty board), O on odd ones."""
    return X if position % 2 == 0 else O


def propose_move(board: Board, cell: Cell, owner: Mark) -> Optional[Board]:
    """
    Returns the board after `owner` marks `cell`, or None when the move is rejected.
    A move is rejected once the game is decided or when the cell is already taken.
    """
    if evaluate(board).decided:
        return None
    if not board.is_empty(cell):
        return None
    return board.with_mark(cell, owner)


def legal_moves(board: Board) -> List[Cell]:
    """Calculates all cells the side to move may still mark."""
    if evaluate(board).decided:
        return []
    return board.empty_cells()
