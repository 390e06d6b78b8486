"""
Enemy motion policies.

Each enemy carries a Behavior tag; ``advance`` picks the matching policy from
a table and returns the enemy's state after one tick. Policies never mutate
the grid or the player, they only read them.
"""

from dataclasses import replace

from mazechase.env.entities import Behavior
from mazechase.problems.search import next_step


def _try_straight(enemy, grid, reverse_both: bool):
    dx, dy = enemy.velocity
    x, y = enemy.position
    if grid.is_walkable(x + dx, y + dy):
        return enemy.moved((x + dx, y + dy))

    # Bateu na parede: inverte a velocidade e fica parado neste tick
    if reverse_both:
        return replace(enemy, velocity=(-dx, -dy))
    if dx != 0:
        return replace(enemy, velocity=(-dx, dy))
    if dy != 0:
        return replace(enemy, velocity=(dx, -dy))
    return enemy


def advance_reactive(enemy, grid, player_pos):
    return _try_straight(enemy, grid, reverse_both=True)


def advance_pursuit(enemy, grid, player_pos):
    if enemy.habitat is not None and enemy.habitat.contains(player_pos):
        step = next_step(enemy.position, player_pos, grid)
        if step is not None:
            delta = (step[0] - enemy.position[0], step[1] - enemy.position[1])
            return enemy.moved(step, delta)
    # Jogador fora do habitat ou sem caminho: volta ao movimento em linha reta
    return _try_straight(enemy, grid, reverse_both=False)


POLICIES = {
    Behavior.REACTIVE: advance_reactive,
    Behavior.PURSUIT: advance_pursuit,
}


def advance(enemy, grid, player_pos):
    """One tick of an enemy: wait out the cooldown, otherwise act per behavior."""
    if enemy.cooldown > 0:
        return replace(enemy, cooldown=enemy.cooldown - 1)
    enemy = replace(enemy, cooldown=enemy.move_interval)
    return POLICIES[enemy.behavior](enemy, grid, player_pos)


def advance_all(enemies, grid, player_pos) -> list:
    return [advance(e, grid, player_pos) for e in enemies]
