from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

Mark = str  # '', 'X', 'O'
Cell = int  # row-major index 0..8

EMPTY: Mark = ''
X: Mark = 'X'
O: Mark = 'O'
MARKS: Tuple[Mark, ...] = (EMPTY, X, O)

SIZE = 3
CELLS = SIZE * SIZE


@dataclass(frozen=True)
class Board:
    """A single snapshot of the 3x3 grid, stored row-major."""
    cells: Tuple[Mark, ...]  # length == 9

    def __post_init__(self) -> None:
        if len(self.cells) != CELLS:
            raise ValueError(f'Board needs {CELLS} cells, got {len(self.cells)}')
        for mark in self.cells:
            if mark not in MARKS:
                raise ValueError(f'Unknown mark: {mark!r}')

    @classmethod
    def empty(cls) -> 'Board':
        return cls(cells=(EMPTY,) * CELLS)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Mark]]) -> 'Board':
        """Builds a board from three rows; '.' and ' ' are read as empty."""
        flat: List[Mark] = []
        for row in rows:
            flat.extend(EMPTY if m in ('.', ' ') else m for m in row)
        return cls(cells=tuple(flat))

    @staticmethod
    def index(r: int, c: int) -> Cell:
        """Calculates the row-major index for a given row and column."""
        return r * SIZE + c

    def at(self, cell: Cell) -> Mark:
        if not 0 <= cell < CELLS:
            raise ValueError(f'Cell out of range: {cell}')
        return self.cells[cell]

    def is_empty(self, cell: Cell) -> bool:
        return self.at(cell) == EMPTY

    def is_full(self) -> bool:
        return all(m != EMPTY for m in self.cells)

    def empty_cells(self) -> List[Cell]:
        return [i for i, m in enumerate(self.cells) if m == EMPTY]

    def with_mark(self, cell: Cell, mark: Mark) -> 'Board':
        """Returns a copy of the board with one cell replaced."""
        if not 0 <= cell < CELLS:
            raise ValueError(f'Cell out of range: {cell}')
        cells = list(self.cells)
        cells[cell] = mark
        return Board(cells=tuple(cells))

    def pretty(self) -> str:
        """Generates a human-readable grid; empty cells show their index."""
        lines: List[str] = []
        for r in range(SIZE):
            row: List[str] = []
            for c in range(SIZE):
                i = self.index(r, c)
                row.append(self.cells[i] or str(i))
            lines.append(' | '.join(row))
        return '\n---------\n'.join(lines)
