"""
Othello game module.
This package contains the board model and the capture rule.
The two-player loop lives in othello.game.game.
"""

from .board import Board, Position, DIRECTIONS

__all__ = ['Board', 'Position', 'DIRECTIONS']
