import pygame
from paint_engine.config import WindowConfig
from paint_engine.core.grid import Grid
from paint_engine.core.session import PuzzleSession
from paint_engine.viz.recorder import VideoRecorder

class PuzzleRenderer:
    COLOR_BG = (247, 247, 247)
    COLOR_WALL = (61, 61, 61)
    COLOR_PAINTED = (250, 176, 64)
    COLOR_OPEN = (230, 230, 230)
    COLOR_FRAME = (51, 51, 64)
    COLOR_START = (26, 153, 230)
    COLOR_PLAYER = (51, 51, 77)
    COLOR_PLAYER_EDGE = (13, 13, 26)
    COLOR_BAR = (255, 255, 247)
    COLOR_TEXT = (0, 0, 0)
    COLOR_CLEARED = (0, 100, 0)

    KEY_DIRECTIONS = {
        pygame.K_RIGHT: Grid.RIGHT,
        pygame.K_DOWN: Grid.DOWN,
        pygame.K_LEFT: Grid.LEFT,
        pygame.K_UP: Grid.UP,
    }

    def __init__(self, session: PuzzleSession, window: WindowConfig = None, record=False):
        self.session = session
        self.window = window or WindowConfig(width=860, height=640, cell_size=88)
        self.recorder = VideoRecorder(active=record, prefix="puzzle")

        # Board centred below the status bar
        size = self.window.cell_size
        cfg = session.config
        self.origin = ((self.window.width - cfg.width * size) // 2,
                       (self.window.height - cfg.height * size) // 2 + 10)

        self.font = None
        self.font_title = None
        self.running = True
        self.clock = None
        self.surface = None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"One-Stroke Puzzle - {self.session.config.width}x{self.session.config.height}")
        self.surface = pygame.display.set_mode((self.window.width, self.window.height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(self.window.font_name, self.window.font_size)
        self.font_title = pygame.font.SysFont(self.window.font_name, 28, bold=True)

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        size = self.window.cell_size
        return pygame.Rect(self.origin[0] + x * size, self.origin[1] + y * size, size, size)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.session.reset()
            elif event.key == pygame.K_g:
                self.session.regenerate()
            elif event.key in self.KEY_DIRECTIONS:
                self.session.move(self.KEY_DIRECTIONS[event.key])

    def handle_input(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def draw_board(self):
        board = self.session.board
        self.surface.fill(self.COLOR_BG)

        for y in range(board.height):
            for x in range(board.width):
                rect = self.cell_rect(x, y)
                if board.is_wall(x, y):
                    color = self.COLOR_WALL
                elif board.is_visited(x, y):
                    color = self.COLOR_PAINTED
                else:
                    color = self.COLOR_OPEN
                pygame.draw.rect(self.surface, color, rect)
                pygame.draw.rect(self.surface, self.COLOR_FRAME, rect, 2)

        start_rect = self.cell_rect(*board.start)
        pygame.draw.rect(self.surface, self.COLOR_START, start_rect, 4)
        if self.font_title:
            lbl = self.font_title.render("S", True, self.COLOR_START)
            self.surface.blit(lbl, lbl.get_rect(center=start_rect.center))

        player_rect = self.cell_rect(*board.player)
        radius = int(self.window.cell_size * 0.32)
        pygame.draw.circle(self.surface, self.COLOR_PLAYER, player_rect.center, radius)
        pygame.draw.circle(self.surface, self.COLOR_PLAYER_EDGE, player_rect.center, radius, 2)

    def draw_hud(self):
        board = self.session.board
        pygame.draw.rect(self.surface, self.COLOR_BAR, (0, 0, self.window.width, 64))
        if board.is_cleared():
            text = "Cleared!  [Space] reset   [G] new board"
            color = self.COLOR_CLEARED
        else:
            text = (f"Painted: {board.painted_count()}/{board.non_wall_count}   "
                    f"[Arrows] move / [Space] reset / [G] new board")
            color = self.COLOR_TEXT
        lbl = self.font_title.render(text, True, color)
        self.surface.blit(lbl, (20, 16))

    def run_loop(self):
        try:
            while self.running:
                self.handle_input()
                self.draw_board()
                self.draw_hud()
                pygame.display.flip()

                if self.recorder.active:
                    self.recorder.capture_frame(self.surface)

                self.clock.tick(self.window.fps)
        finally:
            self.recorder.stop()
            pygame.quit()
