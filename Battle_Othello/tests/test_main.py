"""Settings loading and console wiring for the entry point."""

from Battle_Othello import main as main_mod
from Battle_Othello.Player import HumanPlayer
from Battle_Othello.utils.cli import parse_args


def test_default_settings_file_is_found():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["cell_size"] == 80
    assert settings["mode"] == "gui"


def test_missing_settings_falls_back_to_defaults(tmp_path, capsys):
    assert main_mod.load_settings(tmp_path / "nope.yaml") == {}
    assert "not found" in capsys.readouterr().out


def test_cli_overrides():
    args = parse_args(["--cell-size", "60", "--font", "x.ttf", "--console"])
    assert args.cell_size == 60
    assert args.font == "x.ttf"
    assert args.console is True


def test_console_game_plays_typed_moves(monkeypatch, capsys):
    # Black opens, then input ends and the game is aborted
    typed = iter(["2 3", "oops"])

    def fake_input(prompt=""):
        try:
            return next(typed)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    game = main_mod.build_game(parse_args(["--console"]), {})
    assert isinstance(game.players[-1], HumanPlayer)

    main_mod.main(["--console"])
    out = capsys.readouterr().out
    assert "Move 1: B (2, 3)" in out
    assert "Invalid input format" in out
    assert "Game aborted" in out


def test_console_prompt_names_the_mover():
    prompts = []
    player = HumanPlayer(color=1, reader=lambda p: prompts.append(p) or "4 2")
    assert player.next_move(None) == (4, 2)
    assert prompts == ["White move as 'x y' (0-indexed): "]


def test_game_lines_are_tagged(capsys):
    game = main_mod.build_game(parse_args(["--console"]), {})
    game.logger("Move 1")
    assert "] game: Move 1" in capsys.readouterr().out
