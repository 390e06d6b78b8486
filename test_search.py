import pytest
from mazechase.env.entities import UP, DOWN, LEFT, RIGHT
from mazechase.env.grid import Grid
from mazechase.problems.maze_problem import MazeProblem
from mazechase.problems.search import next_step

# ======================================================================
# FIXTURES (Ambiente Simulado para os Testes)
# ======================================================================

@pytest.fixture
def mini_grid():
    """
    Labirinto 5x5 com uma parede no centro:
        # # # # #
        # . . . #
        # . # . #
        # . . . #
        # # # # #
    """
    return Grid.from_walls(5, 5, [(2, 2)])

@pytest.fixture
def problema_base(mini_grid):
    """Problema com estado inicial em (1,1) e objetivo em (3,3)."""
    return MazeProblem(initial=(1, 1), goal=(3, 3), grid=mini_grid)

# ======================================================================
# FORMULAÇÃO DO PROBLEMA
# ======================================================================

def test_acoes_respeitam_paredes(problema_base):
    """
    Estando em (1,1), há parede em CIMA (1,0) e à ESQUERDA (0,1).
    Só é possível ir para a DIREITA (2,1) e para BAIXO (1,2).
    """
    acoes_possiveis = problema_base.actions((1, 1))

    assert RIGHT in acoes_possiveis
    assert DOWN in acoes_possiveis
    assert UP not in acoes_possiveis
    assert LEFT not in acoes_possiveis

def test_modelo_de_transicao(problema_base):
    assert problema_base.result((1, 1), RIGHT) == (2, 1)
    assert problema_base.result((1, 1), DOWN) == (1, 2)

def test_heuristica_manhattan(problema_base):
    """|1 - 3| + |1 - 3| = 4"""
    assert problema_base.h((1, 1)) == 4
    assert problema_base.h((3, 3)) == 0

def test_custo_uniforme(problema_base):
    assert problema_base.path_cost(5, (1, 1), RIGHT, (2, 1)) == 6

# ======================================================================
# PRÓXIMO PASSO (A*)
# ======================================================================

def test_mesma_celula_nao_tem_passo(mini_grid):
    assert next_step((1, 1), (1, 1), mini_grid) is None

def test_objetivo_vizinho(mini_grid):
    assert next_step((1, 1), (2, 1), mini_grid) == (2, 1)

def test_caminho_unico_em_serpentina():
    """
    Com paredes em (2,1) e (2,2) o único caminho de (1,1) a (3,1)
    contorna a parede por baixo, com 6 passos:
        # # # # #
        # S # G #
        # . # . #
        # . . . #
        # # # # #
    """
    grid = Grid.from_walls(5, 5, [(2, 1), (2, 2)])
    esperado = [(1, 2), (1, 3), (2, 3), (3, 3), (3, 2), (3, 1)]

    assert next_step((1, 1), (3, 1), grid) == (1, 2)

    pos, percorrido = (1, 1), []
    while pos != (3, 1):
        pos = next_step(pos, (3, 1), grid)
        percorrido.append(pos)
        assert len(percorrido) <= len(esperado)
    assert percorrido == esperado

def test_objetivo_cercado_por_paredes():
    """(5,5) fica cercado pela borda e pelas paredes (4,5) e (5,4)."""
    grid = Grid.from_walls(7, 7, [(4, 5), (5, 4)])
    assert next_step((1, 1), (5, 5), grid) is None

def test_objetivo_em_parede(mini_grid):
    assert next_step((1, 1), (2, 2), mini_grid) is None

def test_resultado_deterministico_com_empate(mini_grid):
    """Há dois caminhos mínimos ao redor da parede central; a resposta é sempre a mesma."""
    primeiro = next_step((1, 1), (3, 3), mini_grid)
    assert primeiro in {(2, 1), (1, 2)}
    assert all(next_step((1, 1), (3, 3), mini_grid) == primeiro for _ in range(5))
