"""CLI options for window size, font, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Othello (two players, one board)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--cell-size", type=int, help="Pixel size of one board cell")
    parser.add_argument("--font", help="Path to the TTF font used for the result text")
    parser.add_argument("--font-size", type=int, help="Point size of the result text")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play in the terminal with typed moves instead of the pygame window",
    )
    return parser.parse_args(argv)
