# Настройки игры
# Поле 20x20, по краю стена, внутри змейка и одно яблоко
MAP_SIZE = 20

# Размер клетки в пикселях
CELL_SIZE = 10

# Боковая панель (счёт справа, статус снизу)
PANEL_WIDTH = 80
PANEL_HEIGHT = 30

WIDTH = MAP_SIZE * CELL_SIZE + PANEL_WIDTH
HEIGHT = MAP_SIZE * CELL_SIZE + PANEL_HEIGHT

# Тайлы (коды в матрице мира)
EMPTY = 0
FRUIT = 2
WALL = 4

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Состояния игры
PLAYING = "playing"
PAUSED = "paused"
GAME_OVER = "game_over"

# Скорость: один ход змейки раз в UPDATE_RATE мс, отрисовка каждый кадр
UPDATE_RATE = 100
FPS = 60

# Начальная змейка (хвост -> голова) и направление
INITIAL_SNAKE = [(1, 1), (1, 2), (1, 3)]
INITIAL_DIRECTION = RIGHT

# Сколько раз пробуем случайную клетку для яблока, потом берём из списка свободных
FRUIT_SPAWN_ATTEMPTS = 1000

# Цвета
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
DARK_RED = (178, 0, 0)

BACKGROUND = BLACK
WALL_COLOR = WHITE
FRUIT_COLOR = GREEN
SNAKE = RED
SNAKE_HEAD = DARK_RED
TEXT_COLOR = WHITE

FONT_SIZE = 20
CAPTION = "snek"
