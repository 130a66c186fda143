from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# The Flask app, the CLI entry point and the tests import from here.
# Single-responsibility modules live under tictactoe_core/*.

try:
    from .tictactoe_core.board import Board, Cell, Mark, EMPTY, X, O  # type: ignore
    from .tictactoe_core.rules import (  # type: ignore
        WIN_LINES,
        Outcome,
        UNDECIDED,
        DRAW,
        evaluate,
        winning_line,
    )
    from .tictactoe_core.moves import turn_owner, propose_move, legal_moves  # type: ignore
    from .tictactoe_core.history import History, append_snapshot, jump_to  # type: ignore
    from .tictactoe_core.status import status_message, move_label  # type: ignore
    from .tictactoe_core.session import GameSession, HistoryEntry  # type: ignore
except ImportError:
    from tictactoe_core.board import Board, Cell, Mark, EMPTY, X, O  # type: ignore
    from tictactoe_core.rules import (  # type: ignore
        WIN_LINES,
        Outcome,
        UNDECIDED,
        DRAW,
        evaluate,
        winning_line,
    )
    from tictactoe_core.moves import turn_owner, propose_move, legal_moves  # type: ignore
    from tictactoe_core.history import History, append_snapshot, jump_to  # type: ignore
    from tictactoe_core.status import status_message, move_label  # type: ignore
    from tictactoe_core.session import GameSession, HistoryEntry  # type: ignore


def main() -> None:
    # CLI driver delegated to tictactoe_core.cli
    try:
        from .tictactoe_core.cli import main as _main  # type: ignore
    except ImportError:
        from tictactoe_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
