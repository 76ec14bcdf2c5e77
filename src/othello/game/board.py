"""
Board module for Othello.
Owns the 8x8 grid of cells and the directional capture rule.
Uses a numpy array for the grid so copies never alias between search nodes.
"""
from typing import List, NamedTuple, Optional, Sequence, Tuple
import numpy as np


class Position(NamedTuple):
    """A board coordinate, or one of the eight unit direction vectors."""
    row: int
    col: int


# N, S, E, W, SE, SW, NE, NW
DIRECTIONS = (
    Position(-1, 0),
    Position(1, 0),
    Position(0, 1),
    Position(0, -1),
    Position(1, 1),
    Position(1, -1),
    Position(-1, 1),
    Position(-1, -1),
)


class Board:
    """
    Represents the Othello board as an 8x8 numpy grid of cell states.
    The board knows nothing about turns or strategy; callers name the
    acting player and its opponent on every move.
    """

    # Board dimensions
    SIZE = 8

    # Cell constants
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    SYMBOLS = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: 8x8 array of cell states. None gives an empty board.
        """
        if grid is None:
            self._board = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
            return

        grid = np.asarray(grid)
        if grid.shape != (self.SIZE, self.SIZE):
            raise ValueError(f"Board grid must be {self.SIZE}x{self.SIZE}, got {grid.shape}")
        if not np.issubdtype(grid.dtype, np.integer):
            raise ValueError(f"Board grid must hold integers, got {grid.dtype}")
        # Check before narrowing to int8 so out-of-range values cannot wrap
        if not np.isin(grid, (self.EMPTY, self.BLACK, self.WHITE)).all():
            raise ValueError("Board grid holds a value that is not a cell state")
        self._board = grid.astype(np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """Build a board from eight strings of '.', 'B' and 'W'."""
        lookup = {symbol: cell for cell, symbol in cls.SYMBOLS.items()}
        if len(rows) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} rows, got {len(rows)}")
        grid = []
        for row in rows:
            if len(row) != cls.SIZE:
                raise ValueError(f"Row {row!r} must have {cls.SIZE} cells")
            try:
                grid.append([lookup[symbol] for symbol in row])
            except KeyError as exc:
                raise ValueError(f"Unknown cell symbol {exc.args[0]!r}") from None
        return cls(np.array(grid, dtype=np.int8))

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = type(self).__new__(type(self))
        new_board._board = self._board.copy()
        return new_board

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def make_move(self, move: Tuple[int, int], player: int, opponent: int) -> bool:
        """
        Place a piece for `player` and flip every captured run.

        The piece is placed first; if no direction captures anything the
        placement is rolled back and the board is left untouched.

        Args:
            move: (row, col) of the placed piece
            player: The cell state of the mover
            opponent: The cell state being captured

        Returns:
            bool: True if the move was legal and applied, False otherwise
        """
        row, col = move
        assert self.in_bounds(row, col), f"Move {move} is off the board"

        if self._board[row, col] != self.EMPTY:
            return False

        self._board[row, col] = player
        flipped = 0
        for direction in DIRECTIONS:
            flipped += self._flip_on_direction(direction, row, col, opponent, player)

        if flipped == 0:
            self._board[row, col] = self.EMPTY
            return False
        return True

    def _flip_on_direction(self, direction: Position, row: int, col: int,
                           captured: int, mover: int) -> int:
        """Flip the run of `captured` cells from (row, col) if `mover` closes it."""
        d_row, d_col = direction
        run = []
        r, c = row + d_row, col + d_col
        while self.in_bounds(r, c) and self._board[r, c] == captured:
            run.append((r, c))
            r += d_row
            c += d_col

        if not run or not self.in_bounds(r, c) or self._board[r, c] != mover:
            return 0

        for r, c in run:
            self._board[r, c] = mover
        return len(run)

    def is_valid_move(self, move: Tuple[int, int], player: int, opponent: int) -> bool:
        """Check if a move is legal without touching this board."""
        return self.copy().make_move(move, player, opponent)

    def white_advantage(self) -> int:
        """White cell count minus black cell count."""
        white = np.count_nonzero(self._board == self.WHITE)
        black = np.count_nonzero(self._board == self.BLACK)
        return int(white - black)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current piece counts.

        Returns:
            Tuple of (black_count, white_count)
        """
        return (int(np.count_nonzero(self._board == self.BLACK)),
                int(np.count_nonzero(self._board == self.WHITE)))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 8x8 grid of cell states
        """
        return self._board.copy()

    def to_symbols(self) -> List[List[str]]:
        """The grid as rows of single-character cell tags."""
        return [[self.SYMBOLS[int(cell)] for cell in row] for row in self._board]

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, col = position
        return int(self._board[row, col])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        return "\n".join(' '.join(row) for row in self.to_symbols())

    def __repr__(self) -> str:
        black, white = self.get_score()
        return f"Board(black={black}, white={white})"
