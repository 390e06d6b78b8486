"""
Agents living on the board: the player and the enemies.

Enemies are plain immutable values. A level keeps a tuple of EnemyTemplate,
and every (re)start of the level turns those templates into a fresh roster,
so no AI state ever survives a reset. Motion policies live in
mazechase.agents.enemy_agent.
"""

import enum
from dataclasses import dataclass, replace
from typing import Optional, Tuple

Cell = Tuple[int, int]

# Direções possíveis do jogador (dx, dy)
RIGHT, LEFT, UP, DOWN = (1, 0), (-1, 0), (0, -1), (0, 1)
STOP = (0, 0)
DIRECTIONS = (RIGHT, LEFT, UP, DOWN)


class Behavior(enum.Enum):
    REACTIVE = "reactive"   # anda em linha reta e rebate nas paredes
    PURSUIT = "pursuit"     # persegue o jogador com A* dentro do habitat


@dataclass(frozen=True)
class Habitat:
    """Axis-aligned rectangle, half-open like a screen rect: [x, x+width) × [y, y+height)."""
    x: int
    y: int
    width: int
    height: int

    def contains(self, cell: Cell) -> bool:
        cx, cy = cell
        return self.x <= cx < self.x + self.width and self.y <= cy < self.y + self.height


@dataclass(frozen=True)
class Enemy:
    position: Cell
    velocity: Cell
    color: str
    behavior: Behavior
    habitat: Optional[Habitat] = None
    move_interval: int = 1
    cooldown: int = 0

    def __post_init__(self):
        if not 0 <= self.cooldown <= self.move_interval:
            raise ValueError(
                f"cooldown {self.cooldown} outside [0, {self.move_interval}]"
            )

    def moved(self, position: Cell, velocity: Optional[Cell] = None) -> "Enemy":
        return replace(self, position=position, velocity=velocity or self.velocity)


@dataclass(frozen=True)
class EnemyTemplate:
    position: Cell
    velocity: Cell
    color: str
    behavior: Behavior
    habitat: Optional[Habitat] = None
    move_interval: int = 1
    cooldown: int = 0

    def spawn(self) -> Enemy:
        return Enemy(
            position=self.position,
            velocity=self.velocity,
            color=self.color,
            behavior=self.behavior,
            habitat=self.habitat,
            move_interval=self.move_interval,
            cooldown=self.cooldown,
        )


def build_roster(templates) -> list:
    """Instantiate every template verbatim, keeping the template order."""
    return [t.spawn() for t in templates]


# ══════════════════════════════════════════════════════════════════════════════
#  Player
# ══════════════════════════════════════════════════════════════════════════════
class Player:
    def __init__(self, start: Cell):
        self.start = start
        self.position = start
        self.desired = STOP
        self.facing = RIGHT

    def set_desired_direction(self, dx: int, dy: int):
        if (dx, dy) not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got {(dx, dy)}")
        self.desired = (dx, dy)
        self.facing = (dx, dy)

    def clear_desired_direction(self):
        self.desired = STOP

    def attempt_move(self, grid) -> bool:
        """Step one cell along the desired direction if the target is open."""
        if self.desired == STOP:
            return False
        nx = self.position[0] + self.desired[0]
        ny = self.position[1] + self.desired[1]
        if not grid.is_walkable(nx, ny):
            return False
        self.position = (nx, ny)
        return True

    def respawn(self):
        self.position = self.start
