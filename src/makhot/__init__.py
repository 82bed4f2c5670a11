"""Thai Checkers (Mak-Hot) rules engine and alpha-beta bot.

Layout:
    makhot/
    ├── types.py       # Player, Piece, Move, Difficulty
    ├── rules.py       # Board and direction constants
    ├── board.py       # Board and initial setup
    ├── movegen.py     # Legal moves, forced capture, chain detection
    ├── game_state.py  # apply_move, winner, GameState
    ├── engine.py      # Headless turn driver for human and bot seats
    ├── config.py      # YAML settings
    ├── utils.py       # Logger setup
    └── ai/
        ├── eval.py    # Static evaluation
        └── search.py  # Alpha-beta search and bot move selection
"""

from .types import Player, PieceType, Piece, Position, Move, Difficulty
from .board import Board, initial_board
from .movegen import legal_moves, has_capture, continues_chain
from .game_state import GameState, apply_move, winner
from .ai.eval import evaluate
from .ai.search import choose_move

__version__ = "1.0.0"

__all__ = [
    'Player',
    'PieceType',
    'Piece',
    'Position',
    'Move',
    'Difficulty',
    'Board',
    'initial_board',
    'legal_moves',
    'has_capture',
    'continues_chain',
    'GameState',
    'apply_move',
    'winner',
    'evaluate',
    'choose_move',
]
