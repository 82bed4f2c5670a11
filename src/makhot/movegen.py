"""Move generation for Thai Checkers (Mak-Hot)."""

from typing import List, Optional, Tuple

from .types import Move, Player, Position, Piece
from .board import Board
from .rules import (
    FORWARD_DIRECTIONS_BLACK,
    FORWARD_DIRECTIONS_RED,
    ALL_DIRECTIONS,
)


def get_forward_directions(player: Player) -> List[Tuple[int, int]]:
    """Get the forward diagonal directions for a player."""
    return FORWARD_DIRECTIONS_BLACK if player == Player.BLACK else FORWARD_DIRECTIONS_RED


def generate_man_moves(board: Board, pos: Position, piece: Piece) -> List[Move]:
    """
    Generate moves for a man: one-square forward slides, then forward jumps.

    Men neither slide nor capture backwards.
    """
    moves = []
    row, col = pos
    directions = get_forward_directions(piece.player)

    for dr, dc in directions:
        new_row, new_col = row + dr, col + dc
        if Board.in_bounds(new_row, new_col) and board.is_empty((new_row, new_col)):
            moves.append(Move((row, col), (new_row, new_col)))

    for dr, dc in directions:
        capture_pos = (row + dr, col + dc)
        land_row, land_col = row + 2 * dr, col + 2 * dc
        land_pos = (land_row, land_col)

        if not Board.in_bounds(land_row, land_col):
            continue

        captured_piece = board.get_piece(capture_pos)
        if captured_piece is None or captured_piece.player == piece.player:
            continue

        if board.is_empty(land_pos):
            moves.append(Move((row, col), land_pos, is_capture=True, captured=capture_pos))

    return moves


def generate_king_moves(board: Board, pos: Position, piece: Piece) -> List[Move]:
    """
    Generate moves for a flying king along each of the four diagonals.

    Before any obstruction every empty square is a slide. The first enemy
    piece on the ray becomes the capture candidate and every empty square
    beyond it is a landing square, until the next occupied square ends the
    ray. A friendly piece ends the ray immediately.
    """
    moves = []
    row, col = pos

    for dr, dc in ALL_DIRECTIONS:
        enemy_pos: Optional[Position] = None
        distance = 1
        while True:
            scan_row, scan_col = row + distance * dr, col + distance * dc
            scan_pos = (scan_row, scan_col)

            if not Board.in_bounds(scan_row, scan_col):
                break

            scanned_piece = board.get_piece(scan_pos)

            if scanned_piece is None:
                if enemy_pos is None:
                    moves.append(Move(pos, scan_pos))
                else:
                    moves.append(Move(pos, scan_pos, is_capture=True, captured=enemy_pos))
            elif scanned_piece.player == piece.player or enemy_pos is not None:
                # Own piece, or a second piece behind the candidate
                break
            else:
                enemy_pos = scan_pos

            distance += 1

    return moves


def generate_piece_moves(board: Board, pos: Position, piece: Piece) -> List[Move]:
    """Generate all moves for one piece, before the forced-capture filter."""
    if piece.is_king:
        return generate_king_moves(board, pos, piece)
    return generate_man_moves(board, pos, piece)


def legal_moves(board: Board, player: Player,
                active_piece: Optional[Position] = None) -> List[Move]:
    """
    Generate all legal moves for a player.

    Args:
        board: The current board.
        player: Side to move.
        active_piece: Piece locked in a chain capture. When set, only that
            piece may move; an empty or enemy square yields no moves.

    Returns:
        Legal moves in a stable order. If any capture is available, only
        captures are returned.
    """
    moves: List[Move] = []

    if active_piece is not None:
        piece = board.get_piece(active_piece)
        if piece is not None and piece.player == player:
            moves = generate_piece_moves(board, active_piece, piece)
    else:
        for pos, piece in board.get_pieces(player):
            moves.extend(generate_piece_moves(board, pos, piece))

    # Forced capture applies across all of the player's pieces
    capture_moves = [m for m in moves if m.is_capture]
    if capture_moves:
        return capture_moves

    return moves


def has_capture(board: Board, player: Player,
                active_piece: Optional[Position] = None) -> bool:
    """Check whether the side to move is under a forced capture."""
    return any(m.is_capture for m in legal_moves(board, player, active_piece))


def continues_chain(board: Board, player: Player, move: Move, promoted: bool) -> bool:
    """
    Check whether ``move`` keeps the same piece on the move.

    ``board`` is the position after the move. A capture that did not promote
    continues the turn while the landed piece still has a capture.
    Promotion always ends the chain.
    """
    if not move.is_capture or promoted:
        return False
    return has_capture(board, player, move.end)


def has_legal_moves(board: Board, player: Player) -> bool:
    """Check if a player has any legal moves."""
    # Quick check: does the player have any pieces?
    if not board.has_pieces(player):
        return False

    for pos, piece in board.get_pieces(player):
        if generate_piece_moves(board, pos, piece):
            return True

    return False
