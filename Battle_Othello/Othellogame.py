"""Game state (board + mover) and the turn loop for Othello."""

try:
    from Board import Board, BLACK, WHITE, color_name
    from engine import referee, othello_rules
    from Player import GameAborted
except ImportError:
    from Battle_Othello.Board import Board, BLACK, WHITE, color_name
    from Battle_Othello.engine import referee, othello_rules
    from Battle_Othello.Player import GameAborted


RESULT_TEXT = {BLACK: "Black Wins!", WHITE: "White Wins!", othello_rules.DRAW: "Draw!"}


class Othellogame:
    def __init__(
        self,
        black_player=None,
        white_player=None,
        logger=print,
        renderer=None,
        closer=None,
        hold=None,
        board=None,
        current_color=BLACK,
    ):
        if current_color not in (BLACK, WHITE):
            raise ValueError("current_color must be -1 (black) or 1 (white)")
        self.board = board if board is not None else Board()
        self.current_color = current_color
        self.players = {BLACK: black_player, WHITE: white_player}
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.hold = hold
        self.move_index = 0
        self.last_move = None

    # --- Queries ---

    def get_cell(self, x, y):
        return self.board.get(x, y)

    def current_player(self):
        return self.current_color

    def has_legal_move(self, color):
        return othello_rules.has_legal_move(self.board, color)

    def legal_moves(self, color=None):
        return othello_rules.legal_moves(self.board, self.current_color if color is None else color)

    def is_terminal(self):
        return othello_rules.is_game_over(self.board)

    def must_pass(self):
        """True when the mover is stuck but the opponent can still play."""
        return not self.has_legal_move(self.current_color) and self.has_legal_move(-self.current_color)

    def compute_outcome(self):
        return othello_rules.outcome(self.board)

    def result_text(self):
        return RESULT_TEXT[self.compute_outcome()]

    # --- Mutations ---

    def attempt_place(self, x, y):
        """Place the mover's stone at (x, y). Returns False (no change) if illegal."""
        if not self.board.in_bounds(x, y) or not self.board.is_empty(x, y):
            return False
        flips = othello_rules.flips_for_move(self.board, x, y, self.current_color)
        if not flips:
            return False

        mover = self.current_color
        othello_rules.apply_move(self.board, x, y, mover)
        self.move_index += 1
        self.last_move = (x, y)
        self.logger(f"Move {self.move_index}: {'B' if mover == BLACK else 'W'} ({x}, {y}) flips {len(flips)}")
        self._advance_turn()
        return True

    def _advance_turn(self):
        """Hand the turn to the opponent if it can move; otherwise the mover keeps it."""
        other = othello_rules.opponent(self.current_color)
        if self.has_legal_move(other):
            self.current_color = other
            return True
        if not self.is_terminal():
            self.logger(f"{color_name(other)} has no legal move and passes")
        return False

    def pass_turn(self):
        """Explicitly skip a mover that has no legal move."""
        if not self.must_pass():
            raise ValueError(f"{color_name(self.current_color)} has a legal move or the game is over")
        self.logger(f"{color_name(self.current_color)} has no legal move and passes")
        self.current_color = othello_rules.opponent(self.current_color)

    # --- Loop ---

    def _render(self, game_result=None):
        if self.renderer:
            self.renderer(self.board, self.last_move, self.current_color, game_result)

    def play(self):
        """Run a game to the end. Returns -1 (black win), 1 (white win), 0 (draw), or None if aborted."""
        try:
            while not self.is_terminal():
                if self.must_pass():
                    self.pass_turn()
                    continue

                self._render()
                player = self.players[self.current_color]
                try:
                    move = player.next_move(self)
                except GameAborted as exc:
                    self.logger(f"Game aborted: {exc}")
                    return None

                try:
                    referee.check_move(move, self.board, self.current_color)
                except ValueError as exc:
                    self.logger(f"Ignored {color_name(self.current_color)} move {move}: {exc}")
                    continue
                self.attempt_place(*move)

            game_result = self.compute_outcome()
            self.logger(
                f"Result: {RESULT_TEXT[game_result]} "
                f"(Black {self.board.count(BLACK)} - White {self.board.count(WHITE)})"
            )
            self._render(game_result)
            if self.hold:
                self.hold(self)
            return game_result
        finally:
            if self.closer:
                self.closer()
