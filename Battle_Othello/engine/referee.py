"""Move validation with a human-readable reason for rejected placements."""

try:
    from . import othello_rules
except ImportError:
    from engine import othello_rules

try:
    from Board import InvalidCoordinate
except ImportError:
    from Battle_Othello.Board import InvalidCoordinate


def check_move(move, board, color):
    """
    Validate a move against bounds, occupancy, and the capture rule.
    Raises InvalidCoordinate/ValueError on invalid moves.
    """
    x, y = move
    if not board.in_bounds(x, y):
        raise InvalidCoordinate("Move out of bounds")
    if not board.is_empty(x, y):
        raise ValueError("Cell already occupied")
    if not othello_rules.is_legal(board, x, y, color):
        raise ValueError("Move captures nothing")
    return True
