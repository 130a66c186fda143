from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .board import Board


@dataclass(frozen=True)
class History:
    """Ordered board snapshots; index 0 is always the empty board."""
    snapshots: Tuple[Board, ...]

    def __post_init__(self) -> None:
        if not self.snapshots:
            raise ValueError('History must contain at least the initial board')
        if self.snapshots[0] != Board.empty():
            raise ValueError('History must start from the empty board')

    @classmethod
    def initial(cls) -> 'History':
        return cls(snapshots=(Board.empty(),))

    def __len__(self) -> int:
        return len(self.snapshots)

    def __getitem__(self, index: int) -> Board:
        return self.snapshots[index]

    def __iter__(self) -> Iterator[Board]:
        return iter(self.snapshots)

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self.snapshots)


def append_snapshot(history: History, position: int, board: Board) -> Tuple[History, int]:
    """
    Drops every snapshot after `position`, then appends `board`.
    Returns the new history and the index of the appended snapshot.
    """
    if not history.contains(position):
        raise ValueError(f'Position {position} outside history of length {len(history)}')
    kept = history.snapshots[:position + 1]
    new_history = History(snapshots=kept + (board,))
    return new_history, len(new_history) - 1


def jump_to(history: History, target: int) -> int:
    """Validates `target` as a position in `history`; nothing else changes."""
    if not history.contains(target):
        raise ValueError(f'Cannot jump to {target}: history has {len(history)} entries')
    return target
