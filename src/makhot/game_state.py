"""Move application, terminal detection and game state for Thai Checkers."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import Move, Player, Position
from .board import Board
from .movegen import legal_moves, has_legal_moves, continues_chain


def apply_move(board: Board, move: Move) -> Tuple[Board, bool]:
    """
    Apply a single move and return ``(new_board, promoted)``.

    The input board is not modified. A man landing on its far row becomes a
    king and ``promoted`` is True.

    Raises:
        ValueError: if ``move.start`` is empty. Such a move was not produced
            by ``legal_moves`` for this board.
    """
    new_board = board.clone()

    # Get the piece that's moving
    piece = new_board.remove_piece(move.start)
    if piece is None:
        raise ValueError(f"No piece at {move.start}")

    # Remove captured piece
    if move.is_capture:
        new_board.remove_piece(move.captured)

    # Handle promotion
    promoted = False
    if not piece.is_king and move.end[0] == Board.promotion_row(piece.player):
        piece = piece.promote()
        promoted = True

    new_board.set_piece(move.end, piece)

    return new_board, promoted


def winner(board: Board) -> Optional[Player]:
    """
    Get the winner of a position, or None while both sides can play.

    A player wins when the opponent has no pieces left, or has pieces but no
    legal move. Turn order is not considered.
    """
    if not board.has_pieces(Player.RED):
        return Player.BLACK
    if not board.has_pieces(Player.BLACK):
        return Player.RED

    if not has_legal_moves(board, Player.RED):
        return Player.BLACK
    if not has_legal_moves(board, Player.BLACK):
        return Player.RED

    return None


@dataclass(frozen=True)
class GameState:
    """
    Complete game state including board and turn information.

    This class is immutable - apply_move returns a new state.
    """
    board: Board
    current_player: Player = Player.RED
    active_piece: Optional[Position] = None
    turn_count: int = 1
    winner: Optional[Player] = None

    @classmethod
    def initial(cls) -> "GameState":
        """Create the initial game state. Red moves first."""
        return cls(board=Board.initial())

    def legal_moves(self) -> List[Move]:
        """Get all legal moves for the current player."""
        if self.winner is not None:
            return []
        return legal_moves(self.board, self.current_player, self.active_piece)

    @property
    def must_capture(self) -> bool:
        """True when the side to move is forced to capture."""
        return any(m.is_capture for m in self.legal_moves())

    def apply_move(self, move: Move) -> "GameState":
        """
        Apply a move and return the new game state.

        A non-promoting capture that leaves the piece another capture keeps
        the same player on the move with that piece locked; anything else
        passes the turn.
        """
        new_board, promoted = apply_move(self.board, move)
        result = winner(new_board)

        if continues_chain(new_board, self.current_player, move, promoted):
            return GameState(
                board=new_board,
                current_player=self.current_player,
                active_piece=move.end,
                turn_count=self.turn_count,
                winner=result,
            )

        return GameState(
            board=new_board,
            current_player=self.current_player.opponent(),
            active_piece=None,
            turn_count=self.turn_count + 1,
            winner=result,
        )

    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        return self.winner is not None

    def __str__(self) -> str:
        lines = [
            f"Turn {self.turn_count}: {self.current_player.name}",
            str(self.board),
        ]
        if self.active_piece is not None:
            lines.insert(1, f"Chain capture in progress from {self.active_piece}")
        if self.winner is not None:
            lines.append(f"Game Over! Winner: {self.winner.name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GameState(player={self.current_player.name}, turn={self.turn_count}, "
            f"active={self.active_piece}, winner={self.winner})"
        )
