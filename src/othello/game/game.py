"""
Othello game module.
Sets up the starting position and runs the two-player loop over movers.

A mover is any callable (board, player, opponent) -> (board, finished).
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import numpy as np

from .board import Board, Position
from ..search.minimax import AlphaBetaSearch, generate_moves, white_compare
from ..search.trace import SearchTrace

Mover = Callable[[Board, int, int], Tuple[Board, bool]]

PLAYER_NAMES = {Board.WHITE: "White", Board.BLACK: "Black"}
COLUMN_LETTERS = "abcdefgh"


class InputRetriesExceeded(RuntimeError):
    """Raised when a human player runs out of attempts to enter a legal move."""


def new_board() -> Board:
    """Standard starting position: white on the main diagonal of the centre."""
    board = np.zeros((Board.SIZE, Board.SIZE), dtype=np.int8)
    mid = Board.SIZE // 2 - 1
    board[mid, mid] = Board.WHITE
    board[mid + 1, mid + 1] = Board.WHITE
    board[mid, mid + 1] = Board.BLACK
    board[mid + 1, mid] = Board.BLACK
    return Board(board)


def render_board(board: Board) -> str:
    """Board with letter headers for rows and columns."""
    lines = ["  " + " ".join(COLUMN_LETTERS)]
    for letter, row in zip(COLUMN_LETTERS, board.to_symbols()):
        lines.append(f"{letter} " + " ".join(row))
    return "\n".join(lines)


def parse_move(text: str) -> Optional[Position]:
    """
    Parse a two-letter move such as "cd" (row c, column d).

    Returns:
        The position, or None if the text is not a move on the board
    """
    text = text.strip().lower()
    if len(text) != 2:
        return None
    row = COLUMN_LETTERS.find(text[0])
    col = COLUMN_LETTERS.find(text[1])
    if row < 0 or col < 0:
        return None
    return Position(row, col)


def format_move(move: Tuple[int, int]) -> str:
    row, col = move
    return COLUMN_LETTERS[row] + COLUMN_LETTERS[col]


class AIMover:
    """Mover that asks the alpha-beta search for every move."""

    def __init__(self, search: AlphaBetaSearch, trace_depth: int = 4,
                 trace_file: Optional[str] = None):
        self.search = search
        self.trace_depth = trace_depth
        self.trace_file = trace_file
        self.last_metrics = {}

    def __call__(self, board: Board, player: int, opponent: int) -> Tuple[Board, bool]:
        trace = SearchTrace(max_depth=self.trace_depth) if self.trace_file else None
        move, result = self.search.request_move(board, player, opponent, trace=trace)
        if trace is not None:
            trace.dump(self.trace_file)

        self.last_metrics = {
            'depth': self.search.depth,
            'nodes': self.search.nodes,
            'score': self.search.last_score,
        }
        if move is None:
            return board, True
        return result, False


class HumanMover:
    """Mover that reads moves from a person, re-prompting on bad input."""

    def __init__(self, read_input: Callable[[str], str] = input,
                 write_output: Callable[[str], None] = print,
                 max_retries: Optional[int] = None):
        """
        Args:
            read_input: Prompt function returning one line of text
            write_output: Function used for messages to the player
            max_retries: Failed attempts allowed before giving up; None never gives up
        """
        self.read_input = read_input
        self.write_output = write_output
        self.max_retries = max_retries

    def __call__(self, board: Board, player: int, opponent: int) -> Tuple[Board, bool]:
        if not generate_moves(board, player, opponent, white_compare, limit=1):
            self.write_output(f"{PLAYER_NAMES[player]} has no legal moves.")
            return board, True

        failures = 0
        while True:
            command = self.read_input(f"{PLAYER_NAMES[player]}'s move: ").strip().lower()
            if command == "quit":
                return board, True

            move = parse_move(command)
            if move is None:
                self.write_output(f"Invalid input error: {command!r}")
            else:
                result = board.copy()
                if result.make_move(move, player, opponent):
                    return result, False
                self.write_output("Move error, make move again. Type 'quit' to quit and view score.")

            failures += 1
            if self.max_retries is not None and failures > self.max_retries:
                raise InputRetriesExceeded(
                    f"{PLAYER_NAMES[player]} entered {failures} invalid moves"
                )


@dataclass
class GameResult:
    """Outcome of a finished game."""
    board: Board
    white_advantage: int
    winner: int  # Board.WHITE, Board.BLACK, or Board.EMPTY for a tie
    moves: List[Tuple[int, Position]] = field(default_factory=list)


def describe_result(result: GameResult) -> str:
    if result.winner == Board.WHITE:
        return f"White wins by {result.white_advantage}"
    if result.winner == Board.BLACK:
        return f"Black wins by {-result.white_advantage}"
    return "Tie!"


class ReversiGame:
    """
    Two-player Othello loop. White moves first and the movers alternate
    until one of them reports the game finished.
    """

    def __init__(self, white_mover: Mover, black_mover: Mover,
                 board: Optional[Board] = None, logger=None,
                 display: Optional[Callable[[str], None]] = None):
        """
        Args:
            white_mover: Mover for white
            black_mover: Mover for black
            board: Starting position (default: standard start)
            logger: Optional othello.logger.Logger receiving per-move metrics
            display: Optional function shown the rendered board after each move
        """
        self.board = board if board is not None else new_board()
        self.movers = ((Board.WHITE, Board.BLACK, white_mover),
                       (Board.BLACK, Board.WHITE, black_mover))
        self.logger = logger
        self.display = display
        self.moves: List[Tuple[int, Position]] = []

    @staticmethod
    def _placed(before: Board, after: Board) -> Optional[Position]:
        """The cell that went from empty to occupied, if any."""
        placed = np.argwhere((before.get_board_state() == Board.EMPTY)
                             & (after.get_board_state() != Board.EMPTY))
        if len(placed) != 1:
            return None
        return Position(int(placed[0][0]), int(placed[0][1]))

    def play_turn(self, player: int, opponent: int, mover: Mover) -> bool:
        """Run one mover. Returns True if the game is over."""
        board, finished = mover(self.board, player, opponent)
        if finished:
            return True

        move = self._placed(self.board, board)
        self.board = board
        self.moves.append((player, move))

        if self.logger is not None:
            metrics = {'player': PLAYER_NAMES[player],
                       'move': format_move(move) if move is not None else '-',
                       'advantage': board.white_advantage()}
            metrics.update(getattr(mover, 'last_metrics', {}))
            self.logger.log_metrics(metrics, len(self.moves))
        if self.display is not None:
            self.display(render_board(board))
        return False

    def play(self) -> GameResult:
        """Play until a mover finishes the game."""
        if self.display is not None:
            self.display(render_board(self.board))

        finished = False
        while not finished:
            for player, opponent, mover in self.movers:
                finished = self.play_turn(player, opponent, mover)
                if finished:
                    break
        return self.result()

    def result(self) -> GameResult:
        advantage = self.board.white_advantage()
        if advantage > 0:
            winner = Board.WHITE
        elif advantage < 0:
            winner = Board.BLACK
        else:
            winner = Board.EMPTY
        return GameResult(board=self.board, white_advantage=advantage,
                          winner=winner, moves=list(self.moves))
