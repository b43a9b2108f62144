"""
Клавиши -> действия.
Стрелки, WASD и HJKL двигают змейку, P - пауза, Q - выход.
"""
import pygame
from config import UP, DOWN, LEFT, RIGHT

KEY_DIRECTIONS = {
    pygame.K_h: LEFT, pygame.K_a: LEFT, pygame.K_LEFT: LEFT,
    pygame.K_j: DOWN, pygame.K_s: DOWN, pygame.K_DOWN: DOWN,
    pygame.K_k: UP, pygame.K_w: UP, pygame.K_UP: UP,
    pygame.K_l: RIGHT, pygame.K_d: RIGHT, pygame.K_RIGHT: RIGHT,
}

PAUSE_KEY = pygame.K_p
QUIT_KEY = pygame.K_q


def handle_key(game, key):
    """
    Применить нажатие к игре.
    Возвращает False, если надо выйти (сам процесс здесь не завершаем).
    """
    if key == QUIT_KEY:
        return False

    if key in KEY_DIRECTIONS:
        game.change_direction(KEY_DIRECTIONS[key])
    elif key == PAUSE_KEY:
        game.toggle_pause()

    return True


def handle_events(game, events):
    """Обработка событий pygame за кадр"""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if not handle_key(game, event.key):
                return False
    return True
