"""Tests for the Othellogame loop with scripted players."""

from Battle_Othello.Board import Board, BLACK, WHITE
from Battle_Othello.Othellogame import Othellogame
from Battle_Othello.Player import Player, GameAborted


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, game):
        if self._idx >= len(self._moves):
            raise GameAborted("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


ENDGAME_ROWS = ["BBB....."] + ["........"] * 6 + ["BW......"]


def test_loop_ignores_illegal_clicks_and_reports_winner():
    frames = []
    closed = []

    def renderer(board, last_move, current_color, game_result):
        frames.append((last_move, current_color, game_result))

    black = SeqPlayer(BLACK, [(5, 5), (0, 0), (2, 7)])
    white = SeqPlayer(WHITE, [])
    game = Othellogame(
        black_player=black,
        white_player=white,
        logger=lambda *_: None,
        renderer=renderer,
        closer=lambda: closed.append(True),
        board=Board.from_rows(ENDGAME_ROWS),
    )
    result = game.play()

    assert result == BLACK
    assert game.board.count(WHITE) == 0
    assert frames[-1] == ((2, 7), BLACK, BLACK)
    assert closed == [True]


def test_loop_passes_for_stuck_mover():
    logs = []
    black = SeqPlayer(BLACK, [(2, 7)])
    white = SeqPlayer(WHITE, [])
    game = Othellogame(
        black_player=black,
        white_player=white,
        logger=logs.append,
        board=Board.from_rows(ENDGAME_ROWS),
        current_color=WHITE,
    )
    assert game.play() == BLACK
    assert any("White has no legal move and passes" in line for line in logs)
    assert any(line.startswith("Result: Black Wins!") for line in logs)


def test_abort_returns_none_and_closes():
    closed = []
    held = []
    black = SeqPlayer(BLACK, [(2, 3)])
    white = SeqPlayer(WHITE, [(2, 2)])
    game = Othellogame(
        black_player=black,
        white_player=white,
        logger=lambda *_: None,
        closer=lambda: closed.append(True),
        hold=held.append,
    )
    assert game.play() is None
    assert game.move_index == 2
    assert game.current_player() == BLACK
    assert closed == [True]
    assert held == []


def test_hold_called_with_finished_game():
    held = []
    game = Othellogame(
        black_player=SeqPlayer(BLACK, [(2, 7)]),
        white_player=SeqPlayer(WHITE, []),
        logger=lambda *_: None,
        hold=held.append,
        board=Board.from_rows(ENDGAME_ROWS),
    )
    game.play()
    assert held == [game]
