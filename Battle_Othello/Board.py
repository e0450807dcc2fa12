"""Board state container for the 8x8 Othello grid."""

EMPTY = 0
BLACK = -1
WHITE = 1

SYMBOLS = {BLACK: "B", WHITE: "W", EMPTY: "."}


def color_name(color):
    return "Black" if color == BLACK else "White"


class InvalidCoordinate(ValueError):
    """Raised when a cell outside the board is addressed."""


class Board:
    SIZE = 8

    def __init__(self, empty=False):
        # Store cells as -1 (black), 0 (empty), 1 (white), indexed cells[y][x]
        self.size = self.SIZE
        self.cells = [[EMPTY] * self.size for _ in range(self.size)]
        if not empty:
            self.cells[3][3] = WHITE
            self.cells[4][3] = BLACK
            self.cells[3][4] = BLACK
            self.cells[4][4] = WHITE

    @classmethod
    def from_rows(cls, rows):
        """Build a board from 8 strings of 'B', 'W' and '.' (top row first)."""
        if len(rows) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} rows, got {len(rows)}")
        lookup = {symbol: color for color, symbol in SYMBOLS.items()}
        board = cls(empty=True)
        for y, row in enumerate(rows):
            if len(row) != cls.SIZE:
                raise ValueError(f"row {y} must have {cls.SIZE} cells")
            for x, ch in enumerate(row):
                if ch not in lookup:
                    raise ValueError(f"unknown cell symbol {ch!r}")
                board.cells[y][x] = lookup[ch]
        return board

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x, y):
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(f"cell ({x}, {y}) is off the board")
        return self.cells[y][x]

    def set(self, x, y, color):
        """Write a cell directly; no capture rules are applied."""
        if color not in (BLACK, EMPTY, WHITE):
            raise ValueError("color must be -1 (black), 0 (empty) or 1 (white)")
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(f"cell ({x}, {y}) is off the board")
        self.cells[y][x] = color

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == EMPTY

    def count(self, color):
        return sum(row.count(color) for row in self.cells)

    def empty_count(self):
        return self.count(EMPTY)

    def occupied_count(self):
        return self.size * self.size - self.empty_count()

    def clone(self):
        new_board = Board(empty=True)
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    def __str__(self):
        return "\n".join("".join(SYMBOLS[c] for c in row) for row in self.cells)
