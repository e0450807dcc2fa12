"""Plain-text board renderer for terminal play."""

try:
    from Board import color_name
except ImportError:
    from Battle_Othello.Board import color_name


class ConsoleView:
    def __init__(self, writer=print):
        self.writer = writer

    def render(self, board, last_move=None, current_player_color=None, game_result=None):
        self.writer("  " + " ".join(str(x) for x in range(board.size)))
        for y, line in enumerate(str(board).splitlines()):
            self.writer(f"{y} " + " ".join(line))
        if game_result is None and current_player_color is not None:
            self.writer(f"{color_name(current_player_color)} to move")
