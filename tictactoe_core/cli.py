from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional, Sequence

from .session import GameSession

HELP = 'Commands: 0-8 play a cell, j N jump to history entry N, h history, r restart, q quit'


def _parse_moves(text: str) -> List[int]:
    parts = [t for t in text.replace(',', ' ').split(' ') if t != '']
    return [int(p) for p in parts]


def _show(session: GameSession) -> None:
    print(session.board.pretty())
    print(session.status)


def _show_history(session: GameSession) -> None:
    for entry in session.entries():
        marker = '>' if entry.current else ' '
        print(f'{marker} {entry.index}: {entry.label}')


def replay(moves: Sequence[int]) -> GameSession:
    """Plays a sequence of cells from the empty board; rejected cells are reported and skipped."""
    session = GameSession()
    for cell in moves:
        if not 0 <= cell <= 8 or not session.play(cell):
            print(f'Move at cell {cell} rejected.')
    return session


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Tic-tac-toe with time travel')
    parser.add_argument('--moves', default=None, help='Replay cells non-interactively, e.g. "0,4,1"')
    parser.add_argument('--log-level', default=os.getenv('TICTACTOE_LOG_LEVEL', 'WARNING'),
                        help='Logging level (default from TICTACTOE_LOG_LEVEL)')
    args = parser.parse_args(argv)

    level = args.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f'unknown log level: {args.log_level!r}')
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    if args.moves is not None:
        try:
            moves = _parse_moves(args.moves)
        except ValueError:
            parser.error(f'could not parse --moves: {args.moves!r}')
        _show(replay(moves))
        return

    session = GameSession()
    print(HELP)
    _show(session)
    while True:
        try:
            text = input('> ').strip().lower()
        except EOFError:
            break
        if not text:
            continue
        if text in ('q', 'quit'):
            break
        if text in ('h', 'history'):
            _show_history(session)
            continue
        if text in ('r', 'restart'):
            session.reset()
            _show(session)
            continue
        if text.startswith('j'):
            try:
                index = int(text[1:].strip())
            except ValueError:
                print('Could not parse. Try again.')
                continue
            if not session.jump(index):
                print(f'No history entry {index}.')
                continue
            _show(session)
            continue
        try:
            cell = int(text)
        except ValueError:
            print('Could not parse. Try again.')
            print(HELP)
            continue
        if not 0 <= cell <= 8:
            print('Cells are numbered 0 to 8.')
            continue
        if not session.play(cell):
            print('Illegal move. Try again.')
            continue
        _show(session)
