"""Board state representation for Thai Checkers (Mak-Hot)."""

from typing import Optional, Dict, Iterator, Mapping, Tuple

from .types import Piece, Player, PieceType, Position
from .rules import BOARD_SIZE, BLACK_ROWS, RED_ROWS, PROMOTION_ROW_BLACK, PROMOTION_ROW_RED


class Board:
    """
    8x8 board for Thai Checkers.

    Only dark squares are used: those where (row + col) % 2 == 1.
    Row 0 is the top; Black starts on rows 0-1, Red on rows 6-7.

    Boards are treated as values. Rules code never mutates a board it was
    handed; it clones first and edits the clone.
    """

    SIZE = BOARD_SIZE

    def __init__(self, pieces: Optional[Mapping[Position, Piece]] = None):
        """Create a board, empty unless a position -> piece mapping is given."""
        # Maps position (row, col) -> Piece
        self._pieces: Dict[Position, Piece] = {}
        if pieces:
            for pos, piece in pieces.items():
                self.set_piece(pos, piece)

    def clone(self) -> "Board":
        """Create an independent copy of this board."""
        new_board = Board()
        new_board._pieces = dict(self._pieces)
        return new_board

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard initial setup (8 men per side)."""
        board = cls()

        for row in BLACK_ROWS:
            for col in range(cls.SIZE):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(Player.BLACK, PieceType.MAN))

        for row in RED_ROWS:
            for col in range(cls.SIZE):
                if cls.is_playable(row, col):
                    board.set_piece((row, col), Piece(Player.RED, PieceType.MAN))

        return board

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a playable (dark) square."""
        return (row + col) % 2 == 1

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a position is within the board."""
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    def get_piece(self, pos: Position) -> Optional[Piece]:
        """Get the piece at a position, or None if empty."""
        return self._pieces.get(pos)

    def set_piece(self, pos: Position, piece: Optional[Piece]) -> None:
        """Set or remove a piece at a position."""
        row, col = pos
        if not self.in_bounds(row, col):
            raise ValueError(f"Position {pos} is off the board")
        if piece is None:
            self._pieces.pop(pos, None)
        else:
            self._pieces[pos] = piece

    def remove_piece(self, pos: Position) -> Optional[Piece]:
        """Remove and return the piece at a position."""
        return self._pieces.pop(pos, None)

    def get_pieces(self, player: Optional[Player] = None) -> Iterator[Tuple[Position, Piece]]:
        """
        Iterate over all pieces in row-major order, optionally filtered by player.

        The fixed order keeps move generation stable between calls.
        """
        for pos in sorted(self._pieces):
            piece = self._pieces[pos]
            if player is None or piece.player == player:
                yield pos, piece

    def count_pieces(self, player: Player) -> Tuple[int, int]:
        """Count (men, kings) for a player."""
        men = 0
        kings = 0
        for _, piece in self.get_pieces(player):
            if piece.is_king:
                kings += 1
            else:
                men += 1
        return men, kings

    def is_empty(self, pos: Position) -> bool:
        """Check if a position is empty."""
        return pos not in self._pieces

    def has_pieces(self, player: Player) -> bool:
        """Check if a player has any pieces on the board."""
        return any(p.player == player for p in self._pieces.values())

    @staticmethod
    def promotion_row(player: Player) -> int:
        """Get the promotion row for a player."""
        return PROMOTION_ROW_BLACK if player == Player.BLACK else PROMOTION_ROW_RED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    __hash__ = None  # mutable while being built

    def __str__(self) -> str:
        """String representation of the board."""
        lines = []
        lines.append("  0 1 2 3 4 5 6 7")
        for row in range(self.SIZE):
            row_str = f"{row} "
            for col in range(self.SIZE):
                piece = self.get_piece((row, col))
                if piece is None:
                    row_str += ". " if self.is_playable(row, col) else "  "
                elif piece.player == Player.RED:
                    row_str += "R " if piece.is_king else "r "
                else:
                    row_str += "B " if piece.is_king else "b "
            lines.append(row_str.rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({len(self._pieces)} pieces)"


def initial_board() -> Board:
    """Return a fresh board in the starting position."""
    return Board.initial()
