import pygame
from typing import Optional, Tuple
from paint_engine.config import WindowConfig
from paint_engine.core.session import FloodFillSession, Phase
from paint_engine.viz.recorder import VideoRecorder

class FloodFillRenderer:
    COLOR_BG = (245, 245, 245)
    COLOR_WALL = (64, 64, 64)
    COLOR_OPEN = (255, 255, 255)
    COLOR_FRAME = (191, 191, 191)
    COLOR_CURSOR = (255, 230, 51)
    COLOR_TOP = (255, 51, 51)
    COLOR_BUTTON = (38, 128, 242)
    COLOR_BUTTON_HOVER = (51, 153, 255)
    COLOR_TEXT = (26, 26, 26)
    COLOR_TEXT_DIM = (153, 153, 153)
    COLOR_PANEL = (255, 255, 255)
    COLOR_PANEL_EDGE = (204, 204, 204)

    MAX_STACK_LINES = 22
    LINE_HEIGHT = 18

    def __init__(self, session: FloodFillSession, window: WindowConfig = None, record=False):
        self.session = session
        self.window = window or WindowConfig()
        self.recorder = VideoRecorder(active=record, prefix="flood")

        grid = session.grid
        self.origin = (self.window.origin_x, self.window.origin_y)
        self.panel_x = self.origin[0] + grid.width * self.window.cell_size + 20
        self.confirm_rect = pygame.Rect(self.panel_x, self.origin[1], 140, 44)

        self.font = None
        self.font_title = None
        self.running = True
        self.clock = None
        self.surface = None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Flood Fill - {self.session.grid.width}x{self.session.grid.height}")
        self.surface = pygame.display.set_mode((self.window.width, self.window.height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(self.window.font_name, self.window.font_size)
        self.font_title = pygame.font.SysFont(self.window.font_name, self.window.title_size, bold=True)

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        size = self.window.cell_size
        return pygame.Rect(self.origin[0] + x * size, self.origin[1] + y * size, size, size)

    def cell_at(self, sx: int, sy: int) -> Optional[Tuple[int, int]]:
        size = self.window.cell_size
        gx = (sx - self.origin[0]) // size
        gy = (sy - self.origin[1]) // size
        if not self.session.grid.in_bounds(gx, gy):
            return None
        return int(gx), int(gy)

    def handle_event(self, event):
        session = self.session
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.MOUSEBUTTONDOWN and session.phase is Phase.PREPARING:
            cell = self.cell_at(*event.pos)
            if cell is not None:
                # Left paints a wall, right erases one
                if event.button == 1:
                    session.set_wall(*cell, True)
                elif event.button == 3:
                    session.set_wall(*cell, False)
            elif event.button == 1 and self.confirm_rect.collidepoint(event.pos):
                session.confirm()

        elif event.type == pygame.KEYDOWN:
            if session.phase is Phase.EXPLORING:
                if event.key == pygame.K_q:
                    session.timer.slower()
                elif event.key == pygame.K_w:
                    session.timer.faster()
            elif session.phase is Phase.DONE and event.key == pygame.K_r:
                session.restart()

    def handle_input(self):
        for event in pygame.event.get():
            self.handle_event(event)

    def draw_grid(self):
        grid = self.session.grid
        self.surface.fill(self.COLOR_BG)

        for x, y in grid.cells_row_major():
            rect = self.cell_rect(x, y)
            inner = rect.inflate(-2, -2)
            if grid.is_wall(x, y):
                pygame.draw.rect(self.surface, self.COLOR_WALL, inner)
            elif grid.is_visited(x, y):
                pygame.draw.rect(self.surface, grid.color_at(x, y) or self.COLOR_OPEN, inner)
            else:
                pygame.draw.rect(self.surface, self.COLOR_OPEN, inner)
            pygame.draw.rect(self.surface, self.COLOR_FRAME, rect, 1)

        explorer = self.session.explorer
        if self.session.phase is Phase.EXPLORING:
            cell = explorer.cursor_cell() or (0, 0)
            pygame.draw.rect(self.surface, self.COLOR_CURSOR, self.cell_rect(*cell), 3)

        top = explorer.top
        if top is not None:
            pygame.draw.rect(self.surface, self.COLOR_TOP, self.cell_rect(*top.position), 3)

    def draw_stack_panel(self):
        panel_y = self.origin[1] + 75
        panel = pygame.Rect(self.panel_x - 10, self.origin[1] + 50, 250, 430)
        pygame.draw.rect(self.surface, self.COLOR_PANEL, panel)
        pygame.draw.rect(self.surface, self.COLOR_PANEL_EDGE, panel, 1)
        self.blit_text(self.font_title, "Call stack", (self.panel_x, self.origin[1] + 54))

        frames = self.session.explorer.stack
        if not frames:
            self.blit_text(self.font, "(empty)", (self.panel_x, panel_y), self.COLOR_TEXT_DIM)
            return

        total = len(frames)
        first = max(0, total - self.MAX_STACK_LINES)
        for line, i in enumerate(range(first, total)):
            fx, fy = frames[i].position
            self.blit_text(self.font, f"[{i}] ({fx},{fy})", (self.panel_x, panel_y + line * self.LINE_HEIGHT))
        last_line = min(total, self.MAX_STACK_LINES) - 1
        self.blit_text(self.font, "<- top", (self.panel_x + 160, panel_y + last_line * self.LINE_HEIGHT))

    def draw_hud(self):
        session = self.session
        pos = (self.origin[0], self.origin[1] - 30)
        if session.phase is Phase.PREPARING:
            mouse = pygame.mouse.get_pos()
            color = self.COLOR_BUTTON_HOVER if self.confirm_rect.collidepoint(mouse) else self.COLOR_BUTTON
            pygame.draw.rect(self.surface, color, self.confirm_rect, border_radius=8)
            lbl = self.font_title.render("Confirm", True, (255, 255, 255))
            self.surface.blit(lbl, lbl.get_rect(center=self.confirm_rect.center))
            self.blit_text(self.font_title, "Left click: place wall / Right click: erase wall", pos)
        elif session.phase is Phase.EXPLORING:
            self.blit_text(self.font, f"Step interval: {session.timer.interval:.2f} s/step "
                                      f"(Q/W slower/faster)", pos)
        else:
            self.blit_text(self.font_title, f"Done! {session.explorer.regions} regions. "
                                            f"[R] back to preparing", pos)

    def blit_text(self, font, text, pos, color=None):
        lbl = font.render(text, True, color or self.COLOR_TEXT)
        self.surface.blit(lbl, pos)

    def run_loop(self):
        try:
            while self.running:
                dt = self.clock.tick(self.window.fps) / 1000.0
                self.handle_input()
                self.session.update(dt)

                self.draw_grid()
                self.draw_stack_panel()
                self.draw_hud()
                pygame.display.flip()

                if self.recorder.active:
                    self.recorder.capture_frame(self.surface)
        finally:
            self.recorder.stop()
            pygame.quit()
