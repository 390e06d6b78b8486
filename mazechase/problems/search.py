"""
A* Search
=========
Best-first search over any problem exposing ``initial``, ``actions``,
``result``, ``goal_test``, ``path_cost`` and ``h`` (see MazeProblem).

- The **cost** g(n) counts the moves taken so far (each edge = 1 on the maze).
- The **heuristic** h(n) is the Manhattan distance to the goal, which is
  admissible on a 4-connected grid.
- The frontier is ordered by f = g + h, then by the lower g, then by
  insertion order, so equal inputs always give the same answer.

Only the first move is needed by the enemies, so instead of returning the
whole path the search walks the predecessor links back from the goal until it
reaches the cell whose predecessor is the start. Nothing is cached between
calls: the player moves every tick, so every query is planned from scratch.
"""

import heapq
import itertools

from mazechase.problems.maze_problem import MazeProblem


def astar_first_step(problem):
    start = problem.initial
    if problem.goal_test(start):
        return None

    counter = itertools.count()
    frontier = [(problem.h(start), 0, next(counter), start)]
    g_score = {start: 0}
    came_from = {}
    closed = set()

    while frontier:
        _, g, _, current = heapq.heappop(frontier)
        if current in closed:
            continue
        closed.add(current)

        if problem.goal_test(current):
            return _first_step(came_from, start, current)

        for action in problem.actions(current):
            child = problem.result(current, action)
            if child in closed:
                continue
            tentative = problem.path_cost(g, current, action, child)
            if tentative < g_score.get(child, float("inf")):
                came_from[child] = current
                g_score[child] = tentative
                heapq.heappush(frontier, (tentative + problem.h(child), tentative, next(counter), child))

    return None


def _first_step(came_from, start, goal):
    step = goal
    while came_from[step] != start:
        step = came_from[step]
    return step


def next_step(start, goal, grid):
    """Cell next to ``start`` that begins a shortest path to ``goal``, or None."""
    return astar_first_step(MazeProblem(start, goal, grid))
