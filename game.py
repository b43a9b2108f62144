"""
Логика змейки: движение, столкновения, яблоко, пауза.

Один объект SnakeGame владеет всем состоянием (поле, змейка, направление,
состояние, счёт, время последнего хода). Отрисовки здесь нет.
"""
import numpy as np
from config import (
    MAP_SIZE, UPDATE_RATE, EMPTY, FRUIT, WALL,
    UP, DOWN, LEFT, RIGHT,
    PLAYING, PAUSED, GAME_OVER,
    INITIAL_SNAKE, INITIAL_DIRECTION, FRUIT_SPAWN_ATTEMPTS,
)
from grid import Grid
from snake import Snake

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def inverse(direction):
    """Противоположное направление"""
    dx, dy = direction
    return (-dx, -dy)


def is_inverse(a, b):
    """True только для пар вверх/вниз и влево/вправо"""
    return a == inverse(b)


def next_coord(direction, coord):
    # Обычные int, поэтому выход за 0 даёт -1, а не переполнение
    dx, dy = direction
    x, y = coord
    return (x + dx, y + dy)


class SnakeGame:
    def __init__(self, size=None, update_rate=None, rng=None, now=0,
                 snake=None, direction=None):
        self.size = size or MAP_SIZE
        self.update_rate = UPDATE_RATE if update_rate is None else update_rate
        self.rng = rng if rng is not None else np.random.default_rng()
        self.reset(now, snake, direction)

    def reset(self, now=0, snake=None, direction=None):
        """Новая игра"""
        self.grid = Grid(self.size)
        self.snake = Snake(INITIAL_SNAKE if snake is None else snake)
        self.direction = INITIAL_DIRECTION if direction is None else direction
        self.state = PLAYING
        self.score = 0
        self.last_update = now

        # Яблоко "переезжает" с (1, 1), как после съедения
        self.fruit = (1, 1)
        self.spawn_fruit()

    # --- Яблоко ---

    def place_fruit(self, coord):
        """Поставить яблоко в конкретную клетку (старое убирается)"""
        if not self.grid.is_interior(coord):
            raise ValueError(f"fruit must be inside the walls, got {coord}")
        if coord in self.snake:
            raise ValueError(f"fruit cannot be placed on the snake at {coord}")
        self._clear_fruit()
        self.grid.set_tile(coord, FRUIT)
        self.fruit = coord

    def _clear_fruit(self):
        if self.fruit is not None and self.grid.tile_at(self.fruit) == FRUIT:
            self.grid.set_tile(self.fruit, EMPTY)
        self.fruit = None

    def _free_cells(self):
        return [c for c in self.grid.interior_cells() if c not in self.snake]

    def spawn_fruit(self):
        """
        Случайная свободная клетка внутри стены.
        Сначала случайные попытки, потом выбор из списка свободных клеток,
        чтобы цикл гарантированно закончился на почти заполненном поле.
        """
        self._clear_fruit()

        for _ in range(FRUIT_SPAWN_ATTEMPTS):
            x, y = (int(v) for v in self.rng.integers(1, self.size - 1, size=2))
            if (x, y) not in self.snake:
                self.place_fruit((x, y))
                return self.fruit

        free = self._free_cells()
        if not free:
            # Свободных клеток нет - дальше играть некуда
            self.state = GAME_OVER
            return None
        self.place_fruit(free[self.rng.integers(len(free))])
        return self.fruit

    # --- Управление ---

    def change_direction(self, direction):
        """Разворот на 180° запрещён, иначе змейка врежется в шею"""
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction {direction}")
        if is_inverse(self.direction, direction):
            return False
        self.direction = direction
        return True

    def toggle_pause(self):
        if self.state == PLAYING:
            self.state = PAUSED
        elif self.state == PAUSED:
            self.state = PLAYING
        return self.state

    @property
    def is_over(self):
        return self.state == GAME_OVER

    # --- Ход ---

    def update(self, now):
        """Ход делается только в игре и не чаще, чем раз в update_rate мс"""
        if self.state != PLAYING:
            return False
        if now - self.last_update < self.update_rate:
            return False
        self.step()
        self.last_update = now
        return True

    def step(self):
        """Один ход змейки"""
        if self.state != PLAYING:
            return self.state

        new_head = next_coord(self.direction, self.snake.head())

        # Вышли за поле (возможно только если змейка стартовала на стене)
        if not self.grid.in_bounds(new_head):
            self.state = GAME_OVER
            return self.state

        # Врезались в себя (в том числе в текущий хвост)
        if new_head in self.snake:
            self.state = GAME_OVER
            return self.state

        tile = self.grid.tile_at(new_head)
        self.snake.advance(new_head, grew=(tile == FRUIT))

        if tile == FRUIT:
            self.score += 1
            self.spawn_fruit()
        elif tile == WALL:
            self.state = GAME_OVER

        return self.state
