"""Pygame-based board renderer and mouse input helper."""

try:
    from Board import BLACK, EMPTY
    from Player import GameAborted
    from Othellogame import RESULT_TEXT
    from engine import othello_rules
    from utils.logger import tagged
except ImportError:
    from Battle_Othello.Board import BLACK, EMPTY
    from Battle_Othello.Player import GameAborted
    from Battle_Othello.Othellogame import RESULT_TEXT
    from Battle_Othello.engine import othello_rules
    from Battle_Othello.utils.logger import tagged


# Left, middle, right; 4 and 5 are wheel scrolls
CLICK_BUTTONS = (1, 2, 3)


def pixel_to_cell(pos, cell_size, board_size=8):
    """Map a pixel position to (x, y) on the grid, or None when outside it."""
    mx, my = pos
    if mx < 0 or my < 0:
        return None
    x, y = int(mx) // cell_size, int(my) // cell_size
    if 0 <= x < board_size and 0 <= y < board_size:
        return x, y
    return None


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (0, 128, 0)
    COLOR_CELL = (0, 100, 0)
    COLOR_BLACK = (0, 0, 0)
    COLOR_WHITE = (255, 255, 255)
    COLOR_TEXT = (255, 255, 0)
    COLOR_RED = (200, 0, 0)

    def __init__(self, board_size=8, cell_size=80, font_path=None, font_size=48, logger=tagged("view")):
        import pygame

        self.board_size = board_size
        self.cell_size = cell_size
        self.window_size = board_size * cell_size
        self.logger = logger
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((self.window_size, self.window_size))
        pygame.display.set_caption("Othello")

        self.font_result = self._load_font(font_path, font_size)

        # Translucent stones for the hover marker
        self.black_hover = self._build_stone_surface(self.COLOR_BLACK, 96)
        self.white_hover = self._build_stone_surface(self.COLOR_WHITE, 96)

    def _load_font(self, font_path, font_size):
        """Load the result font; a missing file only disables the end-of-game text."""
        pygame = self._pygame
        try:
            if not font_path:
                # pygame ships a default TTF
                return pygame.font.Font(None, font_size)
            return pygame.font.Font(str(font_path), font_size)
        except (OSError, pygame.error) as exc:
            self.logger(f"Failed to load font {font_path}: {exc}")
            return None

    def _build_stone_surface(self, color, alpha):
        pygame = self._pygame
        surf = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        pygame.draw.circle(surf, color + (alpha,), (self.cell_size // 2, self.cell_size // 2), self.cell_size // 2 - 5)
        return surf

    def _draw_cells(self, board):
        pygame = self._pygame
        cs = self.cell_size
        for y, row in enumerate(board.cells):
            for x, stone_color in enumerate(row):
                pygame.draw.rect(self.screen, self.COLOR_CELL, pygame.Rect(x * cs + 1, y * cs + 1, cs - 2, cs - 2))
                if stone_color == EMPTY:
                    continue
                fill = self.COLOR_BLACK if stone_color == BLACK else self.COLOR_WHITE
                center = (x * cs + cs // 2, y * cs + cs // 2)
                pygame.draw.circle(self.screen, fill, center, cs // 2 - 5)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        lx, ly = last_move
        cs = self.cell_size
        center = (lx * cs + cs // 2, ly * cs + cs // 2)
        self._pygame.draw.circle(self.screen, self.COLOR_RED, center, max(2, cs // 10))

    def _draw_result(self, game_result):
        if self.font_result is None:
            return
        text_surface = self.font_result.render(RESULT_TEXT[game_result], True, self.COLOR_TEXT)
        self.screen.blit(text_surface, (50, self.window_size // 2 - 24))

    def render(self, board, last_move=None, current_player_color=None, game_result=None, flip=True):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_cells(board)
        self._draw_last_move_marker(last_move)
        if game_result is not None:
            self._draw_result(game_result)
        if flip:
            self._pygame.display.flip()

    def _draw_hover_marker(self, board, player_color, pos=None):
        """Shade the hovered cell when it is a legal move; returns that cell or None."""
        if pos is None:
            pos = self._pygame.mouse.get_pos()
        coords = pixel_to_cell(pos, self.cell_size, self.board_size)
        if coords and othello_rules.is_legal(board, coords[0], coords[1], player_color):
            surf = self.black_hover if player_color == BLACK else self.white_hover
            self.screen.blit(surf, (coords[0] * self.cell_size, coords[1] * self.cell_size))
            return coords
        return None

    def wait_for_move(self, game):
        """Pump events until a board cell is clicked; raise GameAborted if the window closes."""
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise GameAborted("Window closed")
                if event.type == pygame.MOUSEBUTTONDOWN and event.button in CLICK_BUTTONS:
                    coords = pixel_to_cell(event.pos, self.cell_size, self.board_size)
                    if coords:
                        return coords

            self.render(game.board, last_move=game.last_move, current_player_color=game.current_color, flip=False)
            self._draw_hover_marker(game.board, game.current_color)
            pygame.display.flip()

            pygame.time.delay(10)

    def wait_for_close(self, game):
        """Keep showing the final position until the window is closed."""
        pygame = self._pygame
        game_result = game.compute_outcome()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
            self.render(game.board, last_move=game.last_move, game_result=game_result)
            pygame.time.delay(30)

    def close(self):
        self._pygame.quit()
