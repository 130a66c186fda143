from __future__ import annotations

from .board import Board
from .moves import turn_owner
from .rules import evaluate


def status_message(board: Board, position: int) -> str:
    outcome = evaluate(board)
    if not outcome.decided:
        return f'Turn {position + 1} for {turn_owner(position)}.'
    if outcome.draw:
        return "It's a draw!"
    return f'{outcome.winner} is the winner!'


def move_label(index: int) -> str:
    """Text shown on the history button for a snapshot."""
    if index == 0:
        return 'Restart'
    return f'Jump to turn {index + 1}'
