"""Search bot: static evaluation and alpha-beta move selection."""

from .eval import evaluate, set_custom_weights, get_weights, WIN_SCORE
from .search import AlphaBetaSearch, SearchResult, minimax, search_move, choose_move

__all__ = [
    'evaluate',
    'set_custom_weights',
    'get_weights',
    'WIN_SCORE',
    'AlphaBetaSearch',
    'SearchResult',
    'minimax',
    'search_move',
    'choose_move',
]
