"""
Отрисовка игры на pygame.Surface.
Показ кадра (flip) делает главный цикл.
"""
import pygame
from config import (
    CELL_SIZE, FONT_SIZE, WALL,
    PAUSED, GAME_OVER,
    BACKGROUND, WALL_COLOR, FRUIT_COLOR, SNAKE, SNAKE_HEAD, TEXT_COLOR,
)

STATUS_TEXT = {
    GAME_OVER: "Game Over",
    PAUSED: "Pause",
}


class Renderer:
    def __init__(self, screen, cell_size=None):
        self.screen = screen
        self.cell_size = cell_size or CELL_SIZE
        self.font = pygame.font.SysFont('arial', FONT_SIZE)

    def cell_rect(self, x, y):
        return pygame.Rect(x * self.cell_size, y * self.cell_size,
                           self.cell_size, self.cell_size)

    def draw_grid(self, game):
        """Стены и яблоко"""
        for x, y, tile in game.grid:
            color = WALL_COLOR if tile == WALL else FRUIT_COLOR
            pygame.draw.rect(self.screen, color, self.cell_rect(x, y))

    def draw_snake(self, game):
        for x, y in game.snake.body():
            pygame.draw.rect(self.screen, SNAKE, self.cell_rect(x, y))
        # Голова темнее
        x, y = game.snake.head()
        pygame.draw.rect(self.screen, SNAKE_HEAD, self.cell_rect(x, y))

    def draw_text(self, text, pos):
        surf = self.font.render(text, True, TEXT_COLOR)
        self.screen.blit(surf, pos)

    def draw_stats(self, game):
        """Статус под полем, счёт справа"""
        field = game.size * self.cell_size

        status = STATUS_TEXT.get(game.state)
        if status:
            self.draw_text(status, (0, field))

        self.draw_text("SCORE:", (field, 0))
        self.draw_text(str(game.score), (field, 2 * self.cell_size))

    def draw(self, game):
        self.screen.fill(BACKGROUND)
        self.draw_grid(game)
        self.draw_snake(game)
        self.draw_stats(game)
