"""
Матрица мира: MAP_SIZE x MAP_SIZE тайлов.

  0 = пусто
  2 = яблоко
  4 = стена

Индексация grid[y, x], координаты снаружи всегда (x, y).
"""
import numpy as np
from config import MAP_SIZE, EMPTY, WALL


class Grid:
    def __init__(self, size=None):
        self.size = size or MAP_SIZE
        self.initialize()

    def initialize(self):
        """Стена по периметру, внутри пусто"""
        self.cells = np.full((self.size, self.size), EMPTY, dtype=np.int8)
        self.cells[0, :] = WALL
        self.cells[-1, :] = WALL
        self.cells[:, 0] = WALL
        self.cells[:, -1] = WALL
        return self

    def in_bounds(self, coord):
        x, y = coord
        return 0 <= x < self.size and 0 <= y < self.size

    def is_interior(self, coord):
        x, y = coord
        return 1 <= x < self.size - 1 and 1 <= y < self.size - 1

    def _check(self, coord):
        # numpy молча понимает отрицательные индексы, нам это не нужно
        if not self.in_bounds(coord):
            raise IndexError(f"coordinate {coord} is outside of {self.size}x{self.size} grid")

    def tile_at(self, coord):
        self._check(coord)
        x, y = coord
        return int(self.cells[y, x])

    def set_tile(self, coord, tile):
        self._check(coord)
        x, y = coord
        self.cells[y, x] = tile

    def interior_cells(self):
        """Все клетки внутри стены"""
        return [(x, y)
                for y in range(1, self.size - 1)
                for x in range(1, self.size - 1)]

    def __iter__(self):
        """(x, y, tile) для каждой непустой клетки"""
        ys, xs = np.nonzero(self.cells != EMPTY)
        for x, y in zip(xs, ys):
            yield int(x), int(y), int(self.cells[y, x])
