from mazechase.env.entities import DOWN, LEFT, RIGHT, UP

# Ordem de expansão dos vizinhos (determinística)
EXPANSION_ORDER = (RIGHT, LEFT, DOWN, UP)


# ======================================================================
#  ESPECIFICAÇÃO FORMAL DO PROBLEMA (Mapeamento em Grid)
# ======================================================================
class MazeProblem:
    """
    Caminho mais curto entre duas células do labirinto.
    Estados são células (x, y); ações são deslocamentos (dx, dy) de uma casa.
    """
    def __init__(self, initial, goal, grid):
        self.initial = initial
        self.goal = goal
        self.grid = grid

    def actions(self, state):
        x, y = state
        return [(dx, dy) for dx, dy in EXPANSION_ORDER
                if self.grid.is_walkable(x + dx, y + dy)]

    def result(self, state, action):
        return (state[0] + action[0], state[1] + action[1])

    def goal_test(self, state):
        return state == self.goal

    def path_cost(self, c, state1, action, state2):
        return c + 1

    def h(self, state):
        # Heurística: Distância de Manhattan no Grid
        x1, y1 = state
        x2, y2 = self.goal
        return abs(x1 - x2) + abs(y1 - y2)
