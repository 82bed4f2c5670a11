"""Game rules constants for Thai Checkers (Mak-Hot)."""

# Board dimensions
BOARD_SIZE = 8

# Starting rows for each player
BLACK_ROWS = range(0, 2)  # Rows 0, 1
RED_ROWS = range(6, 8)    # Rows 6, 7

# Diagonal directions for moves
# Black moves downward (increasing row), Red moves upward (decreasing row)
# (row_delta, col_delta)
FORWARD_DIRECTIONS_BLACK = [(1, -1), (1, 1)]  # Down-left, Down-right
FORWARD_DIRECTIONS_RED = [(-1, -1), (-1, 1)]  # Up-left, Up-right
ALL_DIRECTIONS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]  # For kings

# Promotion
# Black promotes on row 7
# Red promotes on row 0
PROMOTION_ROW_BLACK = 7
PROMOTION_ROW_RED = 0
