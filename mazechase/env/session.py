"""
Maze-chase session: the state machine that owns the whole simulation.

    LEVEL_SELECT ──start_game──► PLAYING ──all pellets eaten──► WON
         ▲                         │                            │
         │                         └──lives exhausted──► LOST   │
         └──────────── return_to_menu / last level cleared ─────┘

Key entry points:
  - SessionController.start_game(level, name)  → new run on a level
  - SessionController.tick()                   → one atomic simulation step
  - SessionController.update(elapsed_ms)       → runs every tick that is due
  - SessionController.render_frame()           → draw-ready RenderFrame

Everything mutable (grid, pellets, enemies, player, score, lives) lives here.
The pathfinder and the collision check only receive it as arguments.
"""

import enum
import logging

from mazechase.agents.enemy_agent import advance_all
from mazechase.config import GameConfig
from mazechase.env.board import LEVELS
from mazechase.env.collisions import detect
from mazechase.env.entities import Player, build_roster
from mazechase.env.events import SessionListener
from mazechase.env.grid import Grid
from mazechase.env.leaderboard import Leaderboard
from mazechase.env.pellets import PelletSet
from mazechase.env.ticker import TickTimer

logger = logging.getLogger(__name__)


class Status(enum.Enum):
    LEVEL_SELECT = "level_select"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class SessionError(RuntimeError):
    """A menu command was issued in a state that does not accept it."""


# ══════════════════════════════════════════════════════════════════════════════
#  RenderFrame - tudo que o frontend precisa para desenhar um tick
# ══════════════════════════════════════════════════════════════════════════════
class RenderFrame:
    __slots__ = (
        "rows", "cols", "walls", "pellets", "enemies",
        "player", "facing", "mouth_open",
        "score", "lives", "level", "status",
    )

    def __init__(self, **kw):
        for k, v in kw.items():
            object.__setattr__(self, k, v)

    def __setattr__(self, *_):
        raise AttributeError("RenderFrame is immutable")


# ══════════════════════════════════════════════════════════════════════════════
#  SessionController
# ══════════════════════════════════════════════════════════════════════════════
class SessionController:
    def __init__(self, levels=LEVELS, leaderboard=None, listener=None, config=None):
        if not levels:
            raise ValueError("at least one level is required")
        self.levels = tuple(levels)
        self.config = config or GameConfig()
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard(self.config.leaderboard_path)
        self.listener = listener or SessionListener()
        self.ticker = TickTimer(self.config.tick_ms)

        self.status = Status.LEVEL_SELECT
        self.player_name = None
        self.current_level = self.levels[0].index
        self.lives = self.config.start_lives
        self.score = 0
        self.mouth_open = False
        self.game_completed = False

        self.level = None
        self.grid = None
        self.pellets = PelletSet()
        self.enemies = []
        self.player = Player(self.config.player_start)

    # ── Superfície de comandos ───────────────────────────────────────────────
    def list_levels(self) -> list:
        return [lvl.index for lvl in self.levels]

    def current_status(self) -> Status:
        return self.status

    def start_game(self, level: int, name=None):
        """Begin a new run on ``level``: full lives, zero score."""
        if name is not None:
            self.player_name = name.strip() or self.config.default_player_name
        elif self.player_name is None:
            self.player_name = self.config.default_player_name

        self.lives = self.config.start_lives
        self.score = 0
        self.game_completed = False
        self._enter_level(level)

    def next_level(self) -> bool:
        """From WON: play the following level, or finish the game if none is left."""
        self._require(Status.WON)
        following = self._level_position(self.current_level) + 1
        if following >= len(self.levels):
            logger.info("all %d levels cleared by %s, final score %d",
                        len(self.levels), self.player_name, self.score)
            self.game_completed = True
            self.status = Status.LEVEL_SELECT
            return False
        # a pontuação continua na mesma partida; as vidas voltam ao máximo
        self.lives = self.config.start_lives
        self._enter_level(self.levels[following].index)
        return True

    def retry_level(self):
        self._require(Status.LOST)
        self.start_game(self.current_level)

    def return_to_menu(self):
        self.stop_game()
        self.status = Status.LEVEL_SELECT

    def stop_game(self):
        was_active = self.ticker.active
        self.ticker.stop()
        if was_active:
            self.listener.on_music_stop()
        if self.status is Status.PLAYING:
            self.status = Status.LEVEL_SELECT

    # ── Entrada do jogador ───────────────────────────────────────────────────
    def set_desired_direction(self, dx: int, dy: int):
        self.player.set_desired_direction(dx, dy)

    def clear_desired_direction(self):
        self.player.clear_desired_direction()

    # ── Loop do jogo ─────────────────────────────────────────────────────────
    def update(self, elapsed_ms) -> int:
        """Run every tick due after ``elapsed_ms``; returns how many ran."""
        ran = 0
        for _ in range(self.ticker.advance(elapsed_ms)):
            if self.status is not Status.PLAYING:
                break
            self.tick()
            ran += 1
        return ran

    def tick(self):
        if self.status is not Status.PLAYING:
            return
        self.mouth_open = not self.mouth_open

        if self.player.attempt_move(self.grid) and self._resolve_contacts():
            return

        self.enemies = advance_all(self.enemies, self.grid, self.player.position)
        if self._resolve_contacts():
            return

        if self.pellets.is_empty():
            logger.info("level %d cleared, score %d", self.current_level, self.score)
            self._finish(Status.WON)
            self.listener.on_level_cleared()

    def render_frame(self) -> RenderFrame:
        return RenderFrame(
            rows       = self.grid.rows if self.grid else self.config.rows,
            cols       = self.grid.cols if self.grid else self.config.cols,
            walls      = tuple(self.grid.walls()) if self.grid else (),
            pellets    = self.pellets.snapshot(),
            enemies    = tuple((e.position, e.color) for e in self.enemies),
            player     = self.player.position,
            facing     = self.player.facing,
            mouth_open = self.mouth_open,
            score      = self.score,
            lives      = self.lives,
            level      = self.current_level,
            status     = self.status,
        )

    # ── Internos ─────────────────────────────────────────────────────────────
    def _enter_level(self, index):
        self.ticker.stop()
        self.level = self._select_level(index)
        self.current_level = self.level.index

        self.grid = Grid.from_walls(self.config.rows, self.config.cols, self.level.walls)
        self.player = Player(self.config.player_start)
        self.pellets = PelletSet.initialize(self.grid, excluding=self.player.start)
        self.enemies = build_roster(self.level.enemies)
        self.mouth_open = False

        self.status = Status.PLAYING
        self.ticker.start()
        self.listener.on_music_start()
        logger.info("level %d started for %s: %d pellets, %d enemies, %d lives",
                    self.current_level, self.player_name, len(self.pellets),
                    len(self.enemies), self.lives)

    def _select_level(self, index):
        for lvl in self.levels:
            if lvl.index == index:
                return lvl
        logger.warning("level %r does not exist, falling back to level %d",
                       index, self.levels[0].index)
        return self.levels[0]

    def _level_position(self, index) -> int:
        return [lvl.index for lvl in self.levels].index(index)

    def _resolve_contacts(self) -> bool:
        """Apply pellet pickup and enemy contact; True when the game just ended."""
        contact = detect(self.player.position, self.pellets, self.enemies)
        if contact.pellet and self.pellets.consume(self.player.position):
            self.score += self.config.pellet_points
            self.listener.on_pellet_eaten()
        if contact.enemy is not None:
            return self._lose_life()
        return False

    def _lose_life(self) -> bool:
        self.player.respawn()
        self.enemies = build_roster(self.level.enemies)
        self.lives -= 1
        self.listener.on_player_died()
        logger.info("player caught on level %d, %d lives left", self.current_level, self.lives)
        if self.lives <= 0:
            self.lives = 0
            logger.info("game over for %s with score %d", self.player_name, self.score)
            self._finish(Status.LOST)
            return True
        return False

    def _finish(self, status):
        self.stop_game()
        self.leaderboard.save(self.player_name, self.score)
        self.status = status

    def _require(self, status):
        if self.status is not status:
            raise SessionError(f"expected {status.name}, session is {self.status.name}")
