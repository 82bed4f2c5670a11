"""Board evaluation for the search bot."""

from typing import Dict, Optional

from ..types import Player, Position
from ..board import Board
from ..game_state import winner


# Score returned for a decided position
WIN_SCORE = 10000

# Default evaluation weights (king worth three men)
DEFAULT_WEIGHTS = {
    'man': 100,
    'king': 300,
    'advancement': 2,
}

# Current active weights (can be customized)
WEIGHTS = DEFAULT_WEIGHTS.copy()


def set_custom_weights(custom_weights: Optional[Dict[str, int]]) -> None:
    """
    Set custom evaluation weights.

    Args:
        custom_weights: Dictionary of weight values, or None to reset to defaults.
    """
    global WEIGHTS
    WEIGHTS = DEFAULT_WEIGHTS.copy()
    if custom_weights is not None:
        WEIGHTS.update(custom_weights)


def get_weights() -> Dict[str, int]:
    """Get the current evaluation weights."""
    return WEIGHTS.copy()


def advancement(pos: Position, player: Player) -> int:
    """Rows a man at ``pos`` has advanced from its own back row."""
    row = pos[0]
    return abs(row - (Board.SIZE - 1 - Board.promotion_row(player)))


def evaluate(board: Board, for_player: Player) -> int:
    """
    Evaluate a board from the perspective of ``for_player``.

    Decided positions score +/-WIN_SCORE. Otherwise the score is material
    plus a small advancement bonus for men, positive for ``for_player``
    and negated for the opponent, so
    ``evaluate(b, RED) == -evaluate(b, BLACK)``.
    """
    result = winner(board)
    if result == for_player:
        return WIN_SCORE
    if result is not None:
        return -WIN_SCORE

    score = 0
    for pos, piece in board.get_pieces():
        multiplier = 1 if piece.player == for_player else -1

        if piece.is_king:
            score += WEIGHTS['king'] * multiplier
        else:
            score += WEIGHTS['man'] * multiplier
            score += advancement(pos, piece.player) * WEIGHTS['advancement'] * multiplier

    return score
