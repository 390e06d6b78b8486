class PelletSet:
    """Cells still holding an uneaten pellet. Only ever shrinks during a level."""

    def __init__(self, cells=()):
        self._cells = set(cells)

    @classmethod
    def initialize(cls, grid, excluding=None) -> "PelletSet":
        cells = set(
            (x, y)
            for y in range(1, grid.rows - 1)
            for x in range(1, grid.cols - 1)
            if grid.is_walkable(x, y)
        )
        cells.discard(excluding)
        return cls(cells)

    def consume(self, cell) -> bool:
        if cell in self._cells:
            self._cells.remove(cell)
            return True
        return False

    def is_empty(self) -> bool:
        return not self._cells

    def snapshot(self) -> frozenset:
        return frozenset(self._cells)

    def __contains__(self, cell):
        return cell in self._cells

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return len(self._cells)
