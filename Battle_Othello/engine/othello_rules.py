"""Othello capture rules: legality, flipping, and the final tally."""

try:
    from Board import Board, BLACK, WHITE
except ImportError:
    from Battle_Othello.Board import Board, BLACK, WHITE

DRAW = 0

DIRECTIONS = [
    (-1, 0), (-1, -1), (0, -1), (1, -1),
    (1, 0), (1, 1), (0, 1), (-1, 1),
]


def opponent(color: int) -> int:
    return -color


def captures_in_direction(board: Board, x: int, y: int, dx: int, dy: int, color: int):
    """
    Collect the opponent stones bracketed by a `color` stone walking from (x, y)
    (exclusive) in (dx, dy). A run that leaves the board or stops at an empty
    cell captures nothing.
    """
    run = []
    other = opponent(color)
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy) and board.cells[cy][cx] == other:
        run.append((cx, cy))
        cx += dx
        cy += dy
    if run and board.in_bounds(cx, cy) and board.cells[cy][cx] == color:
        return run
    return []


def flips_for_move(board: Board, x: int, y: int, color: int):
    """Every stone that placing `color` at (x, y) would flip; empty if illegal."""
    if not board.is_empty(x, y):
        return []
    flips = []
    for dx, dy in DIRECTIONS:
        flips.extend(captures_in_direction(board, x, y, dx, dy, color))
    return flips


def is_legal(board: Board, x: int, y: int, color: int) -> bool:
    if not board.is_empty(x, y):
        return False
    return any(captures_in_direction(board, x, y, dx, dy, color) for dx, dy in DIRECTIONS)


def legal_moves(board: Board, color: int):
    return [
        (x, y)
        for y in range(board.size)
        for x in range(board.size)
        if is_legal(board, x, y, color)
    ]


def has_legal_move(board: Board, color: int) -> bool:
    for y in range(board.size):
        for x in range(board.size):
            if is_legal(board, x, y, color):
                return True
    return False


def apply_move(board: Board, x: int, y: int, color: int):
    """Place `color` at (x, y) and flip captured stones. Raises if illegal."""
    if color not in (BLACK, WHITE):
        raise ValueError("color must be -1 (black) or 1 (white)")
    flips = flips_for_move(board, x, y, color)
    if not flips:
        raise ValueError(f"move ({x}, {y}) captures nothing")
    board.set(x, y, color)
    for fx, fy in flips:
        board.cells[fy][fx] = color
    return flips


def outcome(board: Board) -> int:
    """Return -1 (black wins), 1 (white wins), or 0 (draw) by stone count."""
    black = board.count(BLACK)
    white = board.count(WHITE)
    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return DRAW


def is_game_over(board: Board) -> bool:
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)
