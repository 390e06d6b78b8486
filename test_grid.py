import pytest
from mazechase.env.board import LEVELS, ROWS, COLS
from mazechase.env.grid import Grid
from mazechase.env.pellets import PelletSet

# ======================================================================
# GRID
# ======================================================================

@pytest.fixture
def mini_grid():
    return Grid.from_walls(5, 5, [(2, 2)])

def test_borda_sempre_parede(mini_grid):
    for x in range(5):
        assert mini_grid.is_wall(x, 0) and mini_grid.is_wall(x, 4)
    for y in range(5):
        assert mini_grid.is_wall(0, y) and mini_grid.is_wall(4, y)

def test_fora_do_tabuleiro_nao_anda(mini_grid):
    for x, y in [(-1, 0), (0, -1), (5, 2), (2, 5), (100, 100)]:
        assert not mini_grid.is_walkable(x, y)

def test_celulas_abertas_e_paredes(mini_grid):
    assert mini_grid.is_walkable(1, 1)
    assert not mini_grid.is_walkable(2, 2)
    assert len(mini_grid.open_cells()) == 8
    assert len(mini_grid.walls()) == 17

def test_paredes_fora_do_tabuleiro_sao_ignoradas():
    grid = Grid.from_walls(5, 5, [(10, 10), (-1, 2), (2, 7)])
    assert len(grid.walls()) == 16

def test_grid_imutavel(mini_grid):
    with pytest.raises(AttributeError):
        mini_grid.rows = 10

@pytest.mark.parametrize("level", LEVELS, ids=lambda l: f"fase{l.index}")
def test_todas_as_fases_tem_borda(level):
    grid = Grid.from_walls(ROWS, COLS, level.walls)
    for x in range(COLS):
        assert not grid.is_walkable(x, 0) and not grid.is_walkable(x, ROWS - 1)
    for y in range(ROWS):
        assert not grid.is_walkable(0, y) and not grid.is_walkable(COLS - 1, y)
    assert grid.is_walkable(1, 1)  # largada do jogador

# ======================================================================
# PELLETS
# ======================================================================

def test_comida_em_toda_celula_livre_menos_largada(mini_grid):
    pellets = PelletSet.initialize(mini_grid, excluding=(1, 1))
    assert len(pellets) == 7
    assert (1, 1) not in pellets
    assert (2, 2) not in pellets
    assert (3, 3) in pellets

def test_consumir_so_uma_vez(mini_grid):
    pellets = PelletSet.initialize(mini_grid, excluding=(1, 1))
    assert pellets.consume((3, 3)) is True
    assert pellets.consume((3, 3)) is False
    assert pellets.consume((1, 1)) is False
    assert len(pellets) == 6

def test_fase_degenerada_sem_comida():
    grid = Grid.from_walls(3, 3, [])
    pellets = PelletSet.initialize(grid, excluding=(1, 1))
    assert pellets.is_empty()
    assert list(pellets) == []
