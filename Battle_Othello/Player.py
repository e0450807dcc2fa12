"""Player interface for console and mouse-driven human controllers."""

try:
    from Board import color_name
except ImportError:
    from Battle_Othello.Board import color_name


class GameAborted(RuntimeError):
    """Raised by a player that will not provide any further moves."""


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, game):
        """Return (x, y) for the next move attempt."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, reader=None, writer=None):
        super().__init__(color)
        self.reader = reader or input
        self.writer = writer or print

    def next_move(self, game):
        """Text-input player; re-prompts until two integers are entered."""
        prompt = f"{color_name(self.color)} move as 'x y' (0-indexed): "
        while True:
            try:
                raw = self.reader(prompt).strip()
            except EOFError as exc:
                raise GameAborted("Input closed") from exc
            try:
                x_str, y_str = raw.split()
                return int(x_str), int(y_str)
            except ValueError:
                self.writer("Invalid input format; expected two integers")


class GuiHumanPlayer(Player):
    def __init__(self, color, view):
        super().__init__(color)
        self.view = view

    def next_move(self, game):
        return self.view.wait_for_move(game)
