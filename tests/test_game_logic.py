"""
Tests for the core game logic.

This module tests the fundamental game mechanics including:
- Board representation and operations
- Move generation, forced capture and chain captures
- Move application and promotion
- Terminal detection
"""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from makhot.board import Board, initial_board
from makhot.types import Player, Piece, PieceType, Move
from makhot.movegen import (
    legal_moves,
    generate_king_moves,
    has_capture,
    continues_chain,
    has_legal_moves,
)
from makhot.game_state import apply_move, winner


RED_MAN = Piece(Player.RED, PieceType.MAN)
RED_KING = Piece(Player.RED, PieceType.KING)
BLACK_MAN = Piece(Player.BLACK, PieceType.MAN)
BLACK_KING = Piece(Player.BLACK, PieceType.KING)


def chain_board() -> Board:
    """Red man that can take (4,2) then (2,2), plus an idle Red man."""
    return Board({
        (5, 3): RED_MAN,
        (7, 6): RED_MAN,
        (4, 2): BLACK_MAN,
        (2, 2): BLACK_MAN,
    })


class TestBoard:
    """Tests for Board class."""

    def test_initial_board_setup(self):
        """Test that initial board has 8 men per side on the dark squares."""
        board = initial_board()

        for row in range(2):
            for col in range(8):
                piece = board.get_piece((row, col))
                if (row + col) % 2 == 1:
                    assert piece == BLACK_MAN, f"Expected Black man at ({row}, {col})"
                else:
                    assert piece is None

        for row in range(6, 8):
            for col in range(8):
                piece = board.get_piece((row, col))
                if (row + col) % 2 == 1:
                    assert piece == RED_MAN, f"Expected Red man at ({row}, {col})"
                else:
                    assert piece is None

        assert board.count_pieces(Player.RED) == (8, 0)
        assert board.count_pieces(Player.BLACK) == (8, 0)

    def test_empty_center(self):
        """Test that rows 2-5 are empty initially."""
        board = Board.initial()

        for row in range(2, 6):
            for col in range(8):
                assert board.get_piece((row, col)) is None, f"Expected empty at ({row}, {col})"

    def test_clone_independence(self):
        """Test that cloned board is independent."""
        board = Board.initial()
        clone = board.clone()

        board.remove_piece((0, 1))

        assert clone.get_piece((0, 1)) is not None
        assert clone != board

    def test_off_board_position_rejected(self, empty_board):
        """Test that pieces cannot be placed off the board."""
        with pytest.raises(ValueError):
            empty_board.set_piece((8, 1), RED_MAN)

    def test_pieces_iterate_in_row_major_order(self):
        """Test that piece iteration does not depend on insertion order."""
        board = Board({(6, 1): RED_MAN, (0, 1): BLACK_MAN, (3, 4): RED_KING})

        assert [pos for pos, _ in board.get_pieces()] == [(0, 1), (3, 4), (6, 1)]
        assert [pos for pos, _ in board.get_pieces(Player.RED)] == [(3, 4), (6, 1)]

    def test_promotion_rows(self):
        """Test promotion rows for each player."""
        assert Board.promotion_row(Player.RED) == 0
        assert Board.promotion_row(Player.BLACK) == 7


class TestMoveGeneration:
    """Tests for move generation."""

    def test_initial_moves(self, initial_board):
        """Test that each side starts with seven forward slides."""
        red_moves = legal_moves(initial_board, Player.RED)
        black_moves = legal_moves(initial_board, Player.BLACK)

        assert len(red_moves) == 7
        assert len(black_moves) == 7
        assert not any(m.is_capture for m in red_moves + black_moves)
        assert all(m.end[0] == 5 for m in red_moves)
        assert all(m.end[0] == 2 for m in black_moves)

    def test_move_order_is_stable(self, initial_board):
        """Test that repeated calls give the same order."""
        assert legal_moves(initial_board, Player.RED) == legal_moves(initial_board.clone(), Player.RED)

    def test_man_slides_forward_only(self, empty_board):
        """Test that a Red man slides toward row 0 and a Black man toward row 7."""
        empty_board.set_piece((4, 3), RED_MAN)
        empty_board.set_piece((2, 5), BLACK_MAN)

        red_ends = {m.end for m in legal_moves(empty_board, Player.RED)}
        black_ends = {m.end for m in legal_moves(empty_board, Player.BLACK)}

        assert red_ends == {(3, 2), (3, 4)}
        assert black_ends == {(3, 4), (3, 6)}

    def test_single_capture_is_forced(self, empty_board):
        """Test that an available jump excludes the man's slides."""
        empty_board.set_piece((3, 2), BLACK_MAN)
        empty_board.set_piece((4, 3), RED_MAN)

        moves = legal_moves(empty_board, Player.RED)

        assert moves == [Move((4, 3), (2, 1), is_capture=True, captured=(3, 2))]

    def test_forced_capture_is_global(self, empty_board):
        """Test that a capture by one piece excludes slides by every other piece."""
        empty_board.set_piece((3, 2), BLACK_MAN)
        empty_board.set_piece((4, 3), RED_MAN)
        empty_board.set_piece((6, 7), RED_MAN)

        moves = legal_moves(empty_board, Player.RED)

        assert len(moves) == 1
        assert moves[0].start == (4, 3)
        assert has_capture(empty_board, Player.RED)

    def test_man_does_not_capture_backwards(self, empty_board):
        """Test that an enemy behind a man cannot be jumped."""
        empty_board.set_piece((4, 3), RED_MAN)
        empty_board.set_piece((5, 4), BLACK_MAN)

        moves = legal_moves(empty_board, Player.RED)

        assert not any(m.is_capture for m in moves)
        assert {m.end for m in moves} == {(3, 2), (3, 4)}

    def test_man_capture_needs_empty_landing(self, empty_board):
        """Test that an occupied or off-board landing square blocks a jump."""
        empty_board.set_piece((4, 3), RED_MAN)
        empty_board.set_piece((3, 2), BLACK_MAN)
        empty_board.set_piece((2, 1), BLACK_MAN)
        empty_board.set_piece((2, 3), BLACK_MAN)
        empty_board.set_piece((4, 1), RED_MAN)
        empty_board.set_piece((3, 0), BLACK_MAN)

        assert not has_capture(empty_board, Player.RED)

    def test_man_two_captures(self, empty_board):
        """Test that both forward jumps are offered."""
        empty_board.set_piece((4, 3), RED_MAN)
        empty_board.set_piece((3, 2), BLACK_MAN)
        empty_board.set_piece((3, 4), BLACK_MAN)

        ends = {m.end for m in legal_moves(empty_board, Player.RED)}

        assert ends == {(2, 1), (2, 5)}

    def test_king_slides_any_distance(self, empty_board):
        """Test that a lone king reaches every square on its four diagonals."""
        empty_board.set_piece((4, 3), RED_KING)

        moves = legal_moves(empty_board, Player.RED)

        assert len(moves) == 13
        assert Move((4, 3), (0, 7)) in moves
        assert Move((4, 3), (7, 0)) in moves

    def test_flying_king_lands_on_any_square_beyond(self, empty_board):
        """Test landing squares beyond a distant enemy, stopped by a second piece."""
        empty_board.set_piece((7, 0), RED_KING)
        empty_board.set_piece((4, 3), BLACK_MAN)
        empty_board.set_piece((1, 6), BLACK_MAN)

        moves = legal_moves(empty_board, Player.RED)

        assert moves == [
            Move((7, 0), (3, 4), is_capture=True, captured=(4, 3)),
            Move((7, 0), (2, 5), is_capture=True, captured=(4, 3)),
        ]

    def test_king_cannot_jump_two_pieces_in_a_row(self, empty_board):
        """Test that two adjacent enemies on a ray block it entirely."""
        empty_board.set_piece((7, 0), RED_KING)
        empty_board.set_piece((6, 1), BLACK_MAN)
        empty_board.set_piece((5, 2), BLACK_MAN)

        assert legal_moves(empty_board, Player.RED) == []

    def test_king_blocked_by_own_piece(self, empty_board):
        """Test that a friendly piece stops the king's ray."""
        empty_board.set_piece((7, 0), RED_KING)
        empty_board.set_piece((5, 2), RED_MAN)
        empty_board.set_piece((3, 4), BLACK_MAN)

        king_moves = generate_king_moves(empty_board, (7, 0), RED_KING)

        assert king_moves == [Move((7, 0), (6, 1))]

    def test_active_piece_restricts_generation(self):
        """Test the chain-capture scenario: only the landed piece may continue."""
        board = chain_board()

        first = legal_moves(board, Player.RED)
        assert first == [Move((5, 3), (3, 1), is_capture=True, captured=(4, 2))]

        after, promoted = apply_move(board, first[0])
        assert not promoted
        assert continues_chain(after, Player.RED, first[0], promoted)

        moves = legal_moves(after, Player.RED, active_piece=(3, 1))
        assert moves == [Move((3, 1), (1, 3), is_capture=True, captured=(2, 2))]

    def test_invalid_active_piece_yields_nothing(self):
        """Test that an empty or enemy active square gives no moves."""
        board = chain_board()

        assert legal_moves(board, Player.RED, active_piece=(0, 1)) == []
        assert legal_moves(board, Player.RED, active_piece=(4, 2)) == []

    def test_slide_does_not_continue_chain(self, initial_board):
        """Test that a non-capture never continues the turn."""
        move = legal_moves(initial_board, Player.RED)[0]
        after, promoted = apply_move(initial_board, move)

        assert not continues_chain(after, Player.RED, move, promoted)

    def test_captures_never_land_on_occupied_squares(self):
        """Test that applying any legal move keeps one piece per square."""
        boards = [Board.initial(), chain_board()]
        for board in boards:
            for player in (Player.RED, Player.BLACK):
                for move in legal_moves(board, player):
                    assert board.is_empty(move.end)
                    after, _ = apply_move(board, move)
                    before_count = sum(1 for _ in board.get_pieces())
                    after_count = sum(1 for _ in after.get_pieces())
                    assert after_count == before_count - (1 if move.is_capture else 0)

    def test_has_legal_moves_initial(self, initial_board):
        """Test has_legal_moves for initial board."""
        assert has_legal_moves(initial_board, Player.RED)
        assert has_legal_moves(initial_board, Player.BLACK)


class TestApplyMove:
    """Tests for move application."""

    def test_source_board_unchanged(self, initial_board):
        """Test that applying a move returns a new board."""
        snapshot = initial_board.clone()
        move = legal_moves(initial_board, Player.RED)[0]

        new_board, promoted = apply_move(initial_board, move)

        assert initial_board == snapshot
        assert new_board.get_piece(move.end) == RED_MAN
        assert new_board.is_empty(move.start)
        assert not promoted

    def test_capture_removes_piece(self, empty_board):
        """Test that the captured square is vacated."""
        empty_board.set_piece((3, 2), BLACK_MAN)
        empty_board.set_piece((4, 3), RED_MAN)

        new_board, _ = apply_move(empty_board, Move((4, 3), (2, 1), True, (3, 2)))

        assert new_board.is_empty((3, 2))
        assert not new_board.has_pieces(Player.BLACK)

    def test_flying_capture_removes_distant_piece(self, empty_board):
        """Test that a long king capture removes the jumped piece, not a neighbour."""
        empty_board.set_piece((7, 0), RED_KING)
        empty_board.set_piece((4, 3), BLACK_MAN)

        new_board, promoted = apply_move(empty_board, Move((7, 0), (2, 5), True, (4, 3)))

        assert new_board.get_piece((2, 5)) == RED_KING
        assert new_board.is_empty((4, 3))
        assert not promoted

    def test_red_promotion(self, empty_board):
        """Test that a Red man reaching row 0 becomes a king."""
        empty_board.set_piece((1, 2), RED_MAN)

        new_board, promoted = apply_move(empty_board, Move((1, 2), (0, 1)))

        assert promoted
        assert new_board.get_piece((0, 1)) == RED_KING

    def test_black_promotion(self, empty_board):
        """Test that a Black man reaching row 7 becomes a king."""
        empty_board.set_piece((6, 1), BLACK_MAN)

        new_board, promoted = apply_move(empty_board, Move((6, 1), (7, 0)))

        assert promoted
        assert new_board.get_piece((7, 0)).is_king

    def test_king_is_not_promoted_again(self, empty_board):
        """Test that a king reaching the far row reports no promotion."""
        empty_board.set_piece((3, 4), RED_KING)

        _, promoted = apply_move(empty_board, Move((3, 4), (0, 7)))

        assert not promoted

    def test_promotion_ends_capture_chain(self, empty_board):
        """Test that a promoting capture never continues, even with a capture available."""
        empty_board.set_piece((2, 3), RED_MAN)
        empty_board.set_piece((1, 2), BLACK_MAN)
        empty_board.set_piece((3, 4), BLACK_MAN)

        move = legal_moves(empty_board, Player.RED)[0]
        assert move == Move((2, 3), (0, 1), True, (1, 2))

        new_board, promoted = apply_move(empty_board, move)

        assert promoted
        assert has_capture(new_board, Player.RED, (0, 1))
        assert not continues_chain(new_board, Player.RED, move, promoted)

    def test_empty_start_square_raises(self, empty_board):
        """Test that a move from an empty square is a hard failure."""
        with pytest.raises(ValueError):
            apply_move(empty_board, Move((5, 0), (4, 1)))

    def test_inconsistent_move_rejected(self):
        """Test that capture fields must agree."""
        with pytest.raises(ValueError):
            Move((4, 3), (2, 1), is_capture=True)
        with pytest.raises(ValueError):
            Move((4, 3), (3, 2), captured=(3, 2))


class TestWinner:
    """Tests for terminal detection."""

    def test_no_winner_initially(self, initial_board):
        """Test that the starting position is undecided."""
        assert winner(initial_board) is None

    def test_no_pieces_loses(self, empty_board):
        """Test that a side with no pieces loses."""
        empty_board.set_piece((4, 3), RED_MAN)
        assert winner(empty_board) == Player.RED

        black_only = Board({(2, 3): BLACK_KING})
        assert winner(black_only) == Player.BLACK

    def test_no_moves_loses(self, empty_board):
        """Test that a side with pieces but no legal move loses."""
        empty_board.set_piece((0, 1), BLACK_MAN)
        empty_board.set_piece((1, 0), RED_MAN)
        empty_board.set_piece((1, 2), RED_MAN)
        empty_board.set_piece((2, 3), RED_MAN)

        assert legal_moves(empty_board, Player.BLACK) == []
        assert winner(empty_board) == Player.RED


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
