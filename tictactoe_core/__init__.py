"""
Tic-tac-toe core Python package.

This package contains the immutable data structures and pure-logic helpers
behind the game, kept free of I/O so the Flask app and the CLI share them.
Modules:
- board.py: Board, Mark, Cell
- rules.py: Outcome, evaluate, winning_line
- moves.py: turn_owner, propose_move, legal_moves
- history.py: History, append_snapshot, jump_to
- status.py: status_message, move_label
- session.py: GameSession (owns the mutable (history, position) pair)
"""
