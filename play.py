"""
Змейка.

Использование:
    python play.py

Управление:
    стрелки / WASD / HJKL - движение
    P - пауза
    Q - выход
"""
import sys
import pygame
from config import WIDTH, HEIGHT, FPS, CAPTION
from game import SnakeGame
from controls import handle_events
from renderer import Renderer


class SnakeApp:
    def __init__(self):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()

        self.game = SnakeGame(now=pygame.time.get_ticks())
        self.renderer = Renderer(self.screen)

    def run(self):
        running = True
        reported = False

        while running:
            running = handle_events(self.game, pygame.event.get())
            if not running:
                break

            self.game.update(pygame.time.get_ticks())

            if self.game.is_over and not reported:
                print(f"Game over! Score: {self.game.score}")
                reported = True

            # Рисуем каждый кадр, ход - только по таймеру
            self.renderer.draw(self.game)
            pygame.display.flip()
            self.clock.tick(FPS)


def main():
    try:
        app = SnakeApp()
        app.run()
    except Exception as e:
        print(f"Error occured: {e}")
        return 1
    finally:
        pygame.quit()

    print("Exited cleanly.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
