"""Alpha-beta search and bot move selection."""

import logging
import random
from dataclasses import dataclass
from typing import Optional, List, Union

from ..types import Difficulty, Move, Player, Position
from ..board import Board
from ..game_state import apply_move, winner
from ..movegen import legal_moves, continues_chain
from .eval import evaluate, WIN_SCORE


logger = logging.getLogger(__name__)

# Search depth in plies for each difficulty. Easy does not search.
SEARCH_DEPTHS = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 4,
}


@dataclass
class SearchResult:
    """Result of a search."""
    move: Optional[Move]
    score: float
    depth: int
    nodes: int


class AlphaBetaSearch:
    """
    Depth-limited minimax with alpha-beta pruning, scored for one bot.

    A capture step that leaves the same piece another capture is searched at
    the same depth and with the same side to move, so a forced multi-jump
    counts as a single ply.
    """

    def __init__(self, bot_player: Player):
        self.bot_player = bot_player
        self.nodes_searched = 0

    def minimax(self, board: Board, depth: int, alpha: float, beta: float,
                maximizing: bool, active_piece: Optional[Position] = None) -> float:
        """
        Score ``board`` for the bot.

        ``maximizing`` is True when the bot is to move. ``active_piece`` locks
        move generation to the piece in the middle of a chain capture.
        """
        self.nodes_searched += 1

        if depth <= 0 or winner(board) is not None:
            return evaluate(board, self.bot_player)

        current = self.bot_player if maximizing else self.bot_player.opponent()
        moves = legal_moves(board, current, active_piece)

        if not moves:
            # Side to move is stuck and loses
            return -WIN_SCORE if maximizing else WIN_SCORE

        if maximizing:
            best_score = float('-inf')
            for move in moves:
                score = self._search_child(board, move, current, depth, alpha, beta, maximizing)
                best_score = max(best_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Beta cutoff
            return best_score

        best_score = float('inf')
        for move in moves:
            score = self._search_child(board, move, current, depth, alpha, beta, maximizing)
            best_score = min(best_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break  # Alpha cutoff
        return best_score

    def _search_child(self, board: Board, move: Move, mover: Player, depth: int,
                      alpha: float, beta: float, maximizing: bool) -> float:
        """Apply ``move`` and search the resulting node."""
        new_board, promoted = apply_move(board, move)

        if continues_chain(new_board, mover, move, promoted):
            return self.minimax(new_board, depth, alpha, beta, maximizing, move.end)

        return self.minimax(new_board, depth - 1, alpha, beta, not maximizing)

    def search(self, board: Board, moves: List[Move], depth: int) -> SearchResult:
        """
        Score every root move with a full window and keep the best.

        Ties keep the first move in ``moves``; callers shuffle beforehand for
        varied play.
        """
        self.nodes_searched = 0
        best_move: Optional[Move] = moves[0] if moves else None
        best_score = float('-inf')

        for move in moves:
            score = self._search_child(
                board, move, self.bot_player, depth,
                float('-inf'), float('inf'), True,
            )
            if score > best_score:
                best_score = score
                best_move = move

        return SearchResult(best_move, best_score, depth, self.nodes_searched)


def minimax(board: Board, depth: int, alpha: float, beta: float, maximizing: bool,
            bot_player: Player, active_piece: Optional[Position] = None) -> float:
    """Score ``board`` for ``bot_player`` with a fresh searcher."""
    return AlphaBetaSearch(bot_player).minimax(board, depth, alpha, beta, maximizing, active_piece)


def search_move(board: Board, bot_player: Player,
                difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
                active_piece: Optional[Position] = None,
                rng: Optional[random.Random] = None,
                max_depth: Optional[int] = None) -> SearchResult:
    """
    Pick a move for the bot and return full search information.

    Args:
        board: Current board.
        bot_player: Side the bot plays.
        difficulty: 'easy' picks uniformly at random; 'medium' and 'hard'
            search to their depth.
        active_piece: Piece locked in a chain capture, if any.
        rng: Random source for the easy pick and tie shuffling.
        max_depth: Override for the difficulty's search depth.

    Returns:
        SearchResult with move None when the bot has no legal move.

    Raises:
        ValueError: for an unknown difficulty name.
    """
    difficulty = Difficulty(difficulty)
    if rng is None:
        rng = random.Random()

    moves = legal_moves(board, bot_player, active_piece)
    if not moves:
        return SearchResult(None, -WIN_SCORE, 0, 0)

    if difficulty == Difficulty.EASY:
        return SearchResult(rng.choice(moves), 0, 0, 0)

    depth = max_depth if max_depth is not None else SEARCH_DEPTHS[difficulty]

    # Shuffle so equal scores are broken at random
    moves = list(moves)
    rng.shuffle(moves)

    result = AlphaBetaSearch(bot_player).search(board, moves, depth)
    logger.debug(
        "%s %s depth=%d: %s score=%s nodes=%d",
        bot_player.name, difficulty.value, depth, result.move, result.score, result.nodes,
    )
    return result


def choose_move(board: Board, bot_player: Player,
                difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
                active_piece: Optional[Position] = None,
                rng: Optional[random.Random] = None,
                max_depth: Optional[int] = None) -> Optional[Move]:
    """
    Get the bot's move, or None if it has no legal moves.

    See search_move for the arguments.
    """
    return search_move(board, bot_player, difficulty, active_piece, rng, max_depth).move
