"""Type definitions for Thai Checkers (Mak-Hot)."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Player(IntEnum):
    """Player identifiers."""
    NONE = 0   # Sentinel, never placed on the board
    RED = 1    # Starts on rows 6-7, moves upward (decreasing row)
    BLACK = 2  # Starts on rows 0-1, moves downward (increasing row)

    def opponent(self) -> "Player":
        """Return the opposing player."""
        if self == Player.RED:
            return Player.BLACK
        if self == Player.BLACK:
            return Player.RED
        return Player.NONE


class PieceType(Enum):
    """Types of pieces."""
    MAN = "man"
    KING = "king"


class Difficulty(Enum):
    """Bot difficulty tiers."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Piece:
    """A game piece on the board."""
    player: Player
    piece_type: PieceType = PieceType.MAN

    @property
    def is_king(self) -> bool:
        """Check if this piece is a king."""
        return self.piece_type == PieceType.KING

    def promote(self) -> "Piece":
        """Return a promoted (king) version of this piece."""
        return Piece(self.player, PieceType.KING)


# Type alias for board positions: (row, col)
Position = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """
    A single step of a turn.

    A chain capture is played as several Moves by the same piece, never as one
    composite move.

    Attributes:
        start: Square the piece leaves.
        end: Square the piece lands on.
        is_capture: True if this step removes an enemy piece.
        captured: Square of the removed piece. For a flying king this is not
                  necessarily the square next to ``end``.
    """
    start: Position
    end: Position
    is_capture: bool = False
    captured: Optional[Position] = None

    def __post_init__(self):
        if self.is_capture != (self.captured is not None):
            raise ValueError(
                f"Inconsistent capture fields: is_capture={self.is_capture}, "
                f"captured={self.captured}"
            )

    def __repr__(self) -> str:
        (r1, c1), (r2, c2) = self.start, self.end
        if self.is_capture:
            return f"Move(({r1},{c1})x({r2},{c2}), captured={self.captured})"
        return f"Move(({r1},{c1})->({r2},{c2}))"
