"""
Static wall grid of a level.

Built once per level load and never mutated afterwards. Coordinates are
(x, y) with x the column and y the row, matching the level data.
"""

OPEN, WALL = 0, 1


class Grid:
    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int, cells):
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)
        object.__setattr__(self, "_cells", tuple(tuple(row) for row in cells))

    def __setattr__(self, *_):
        raise AttributeError("Grid is immutable")

    @classmethod
    def from_walls(cls, rows: int, cols: int, walls) -> "Grid":
        cells = [[OPEN] * cols for _ in range(rows)]

        # Borda de 1 célula
        for x in range(cols):
            cells[0][x] = cells[rows - 1][x] = WALL
        for y in range(rows):
            cells[y][0] = cells[y][cols - 1] = WALL

        # Paredes da fase (coordenadas fora do tabuleiro são ignoradas)
        for x, y in walls:
            if 0 <= x < cols and 0 <= y < rows:
                cells[y][x] = WALL
        return cls(rows, cols, cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_wall(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cells[y][x] == WALL

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cells[y][x] == OPEN

    def walls(self) -> list:
        return [(x, y) for y in range(self.rows) for x in range(self.cols)
                if self._cells[y][x] == WALL]

    def open_cells(self) -> list:
        return [(x, y) for y in range(self.rows) for x in range(self.cols)
                if self._cells[y][x] == OPEN]

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols})"
