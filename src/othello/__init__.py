"""
Othello with a minimax, alpha-beta pruning computer player.
"""

__version__ = "0.1"
