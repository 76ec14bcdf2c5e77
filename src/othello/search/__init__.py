"""
Minimax search with alpha-beta pruning.
"""
from .minimax import (AlphaBetaSearch, generate_moves, comparators_for,
                      white_compare, black_compare, INF)
from .trace import SearchTrace

__all__ = ['AlphaBetaSearch', 'generate_moves', 'comparators_for',
           'white_compare', 'black_compare', 'INF', 'SearchTrace']
