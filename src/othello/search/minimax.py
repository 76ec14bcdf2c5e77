"""
Minimax search with alpha-beta pruning for Othello.

Each ply is scored on the same raw scalar, the white advantage. The side to
move reads that scalar through its own comparator and the comparators swap
at every ply, so the recursion never branches on colour.
"""
import logging
import time
from typing import Callable, List, Optional, Tuple
import numpy as np

from ..game.board import Board, Position
from .trace import SearchTrace

logger = logging.getLogger(__name__)

Comparator = Callable[[int], int]

INF = 999999
MAX_CANDIDATES = 8


def white_compare(x: int) -> int:
    """Map the white advantage to how favorable the position is for white."""
    return x


def black_compare(x: int) -> int:
    """Map the white advantage to how favorable the position is for black."""
    return -x


def comparators_for(player: int) -> Tuple[Comparator, Comparator]:
    """Return (mine, theirs) for `player`."""
    if player == Board.WHITE:
        return white_compare, black_compare
    return black_compare, white_compare


def is_maximizing(comparator: Comparator) -> bool:
    """True when the comparator favors a larger white advantage."""
    return comparator(1) > 0


def candidate_cells(board: Board, opponent: int) -> np.ndarray:
    """Empty cells with at least one opponent piece among their 8 neighbours, row-major."""
    grid = board.get_board_state()
    size = Board.SIZE
    padded = np.pad(grid == opponent, 1)
    near = np.zeros((size, size), dtype=bool)
    for d_row in (-1, 0, 1):
        for d_col in (-1, 0, 1):
            if d_row == 0 and d_col == 0:
                continue
            near |= padded[1 + d_row:1 + d_row + size, 1 + d_col:1 + d_col + size]
    return np.argwhere((grid == Board.EMPTY) & near)


def generate_moves(board: Board, player: int, opponent: int, comparator: Comparator,
                   limit: int = MAX_CANDIDATES) -> List[Position]:
    """
    Legal moves for `player`, best immediate result first.

    Args:
        board: Position to move from
        player: The side to move
        opponent: The other side
        comparator: The mover's view of the white advantage
        limit: Maximum number of moves kept

    Returns:
        Up to `limit` moves sorted by the mover's score after playing them.
        Moves with equal scores keep row-major order.
    """
    scored = []
    for row, col in candidate_cells(board, opponent):
        move = Position(int(row), int(col))
        cloned = board.copy()
        if cloned.make_move(move, player, opponent):
            scored.append((comparator(cloned.white_advantage()), move))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [move for _, move in scored[:limit]]


class AlphaBetaSearch:
    """Depth-limited minimax with alpha-beta pruning over cloned boards."""

    def __init__(self, depth: int = 5, max_candidates: int = MAX_CANDIDATES):
        """
        Initialize the search.

        Args:
            depth: Plies searched when a caller does not pass its own depth
            max_candidates: Branching factor kept at every node
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        if max_candidates < 1:
            raise ValueError(f"max_candidates must be at least 1, got {max_candidates}")
        self.depth = depth
        self.max_candidates = max_candidates
        self.nodes = 0
        self.last_score: Optional[int] = None

    @classmethod
    def from_config(cls, search_config) -> 'AlphaBetaSearch':
        return cls(depth=search_config.depth, max_candidates=search_config.max_candidates)

    def request_move(self, board: Board, player: int, opponent: int,
                     depth: Optional[int] = None,
                     trace: Optional[SearchTrace] = None) -> Tuple[Optional[Position], Optional[Board]]:
        """
        Choose a move for `player` and play it on a copy of `board`.

        Returns:
            (move, resulting board), or (None, None) when `player` has no
            legal move
        """
        depth = self.depth if depth is None else depth
        mine, theirs = comparators_for(player)

        self.nodes = 0
        start_time = time.time()
        move, score = self.evaluate(board, player, opponent, mine, theirs, -INF, INF, depth, trace)
        elapsed = time.time() - start_time
        self.last_score = score

        logger.debug("depth %d move %s score %d nodes %d time %.3fs",
                     depth, move, score, self.nodes, elapsed)

        if move is None:
            return None, None
        result = board.copy()
        result.make_move(move, player, opponent)
        return move, result

    def evaluate(self, board: Board, player: int, opponent: int,
                 mine: Comparator, theirs: Comparator,
                 alpha: int, beta: int, depth_remaining: int,
                 trace: Optional[SearchTrace] = None) -> Tuple[Optional[Position], int]:
        """
        Search `board` with `player` to move.

        Returns:
            (best move, white advantage backed up to this node). The move is
            None when `player` has no legal move.
        """
        self.nodes += 1
        moves = generate_moves(board, player, opponent, mine, self.max_candidates)

        if not moves:
            return None, board.white_advantage()
        if depth_remaining <= 0:
            return moves[0], board.white_advantage()

        maximizing = is_maximizing(mine)
        best_move = moves[0]
        best_score = None

        for move in moves:
            child = board.copy()
            child.make_move(move, player, opponent)

            if trace is not None:
                trace.enter(move)
            _, score = self.evaluate(child, opponent, player, theirs, mine,
                                     alpha, beta, depth_remaining - 1, trace)
            if trace is not None:
                trace.leave(move, score)

            # Strictly greater: ties keep the earlier move
            if best_score is None or mine(score) > mine(best_score):
                best_move = move
                best_score = score

            if maximizing:
                alpha = max(alpha, score)
            else:
                beta = min(beta, score)
            if alpha >= beta:
                break

        return best_move, best_score
