"""Entry point for Battle Othello. Load config, wire players and view, start Othellogame."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event, tagged
    from Othellogame import Othellogame
    from Player import HumanPlayer, GuiHumanPlayer
    from Board import BLACK, WHITE
    from gui.console_view import ConsoleView
    from gui.pygame_view import PygameView
except ImportError:
    from Battle_Othello.utils.cli import parse_args
    from Battle_Othello.utils.logger import log_event, tagged
    from Battle_Othello.Othellogame import Othellogame
    from Battle_Othello.Player import HumanPlayer, GuiHumanPlayer
    from Battle_Othello.Board import BLACK, WHITE
    from Battle_Othello.gui.console_view import ConsoleView
    from Battle_Othello.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Othello/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    if not path.exists():
        log_event(f"Settings file {path} not found; using defaults", source="config")
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_game(args, settings):
    """Create the players, view, and game described by CLI args and settings."""
    console = args.console or settings.get("mode", "gui") == "console"

    if console:
        view = ConsoleView()
        return Othellogame(
            black_player=HumanPlayer(color=BLACK),
            white_player=HumanPlayer(color=WHITE),
            logger=tagged("game"),
            renderer=view.render,
        )

    cell_size = args.cell_size or settings.get("cell_size", 80)
    font_size = args.font_size or settings.get("font_size", 48)
    font_path = args.font or settings.get("font_path")
    if font_path:
        font_path = resolve_project_path(font_path)

    view = PygameView(board_size=8, cell_size=cell_size, font_path=font_path, font_size=font_size, logger=tagged("view"))
    return Othellogame(
        black_player=GuiHumanPlayer(color=BLACK, view=view),
        white_player=GuiHumanPlayer(color=WHITE, view=view),
        logger=tagged("game"),
        renderer=view.render,
        closer=view.close,
        hold=view.wait_for_close,
    )


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    game = build_game(args, settings)
    result = game.play()
    outcome = {BLACK: "Black wins", WHITE: "White wins", 0: "Draw"}
    print(outcome.get(result, "Game aborted"))


if __name__ == "__main__":
    main()
