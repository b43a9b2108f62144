"""
Тело змейки.
Хранится в deque от хвоста (индекс 0) к голове (последний элемент).
"""
from collections import deque


class Snake:
    def __init__(self, positions):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("snake needs at least one segment")
        if len(set(self.positions)) != len(self.positions):
            raise ValueError(f"snake segments overlap: {list(self.positions)}")

    def head(self):
        """Голова - последний элемент"""
        if not self.positions:
            raise IndexError("snake is empty")
        return self.positions[-1]

    def advance(self, new_head, grew):
        """Новая голова; хвост убираем, если ничего не съели"""
        self.positions.append(new_head)
        if not grew:
            self.positions.popleft()

    def contains(self, coord):
        return coord in self.positions

    def body(self):
        """Все сегменты кроме головы"""
        return list(self.positions)[:-1]

    def __contains__(self, coord):
        return self.contains(coord)

    def __len__(self):
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)
