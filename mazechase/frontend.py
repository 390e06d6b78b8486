"""
pygame frontend for the maze-chase session.

Only an adapter: it turns key presses into session commands, feeds the
frame clock to SessionController.update() and draws the RenderFrame. Game
rules live in mazechase.env.session.

Controls
--------
- Name screen: type a name, Enter to confirm
- Menu: 1-4 pick a level, L toggles the leaderboard, Esc quits
- Playing: arrow keys move while held, Esc back to the menu
- Level cleared: N next level, M menu
- Game over: R retry, M menu
"""

import argparse
import logging
from pathlib import Path

import pygame

from mazechase.config import GameConfig
from mazechase.env.entities import DOWN, LEFT, RIGHT, UP
from mazechase.env.events import SessionListener
from mazechase.env.leaderboard import Leaderboard, format_leaderboard
from mazechase.env.session import SessionController, Status

logger = logging.getLogger(__name__)

ASSETS = Path(__file__).resolve().parent.parent / "assets"
FPS = 60
HUD_H = 50

KEY_DIRECTIONS = {pygame.K_RIGHT: RIGHT, pygame.K_LEFT: LEFT, pygame.K_UP: UP, pygame.K_DOWN: DOWN}
LEVEL_KEYS = {pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3, pygame.K_4: 4}


# ══════════════════════════════════════════════════════════════════════════════
#  Áudio
# ══════════════════════════════════════════════════════════════════════════════
class PygameSoundCues(SessionListener):
    def __init__(self, sound_dir=ASSETS / "sounds"):
        self.enabled = True
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            self.enabled = False
        self.sound_dir = Path(sound_dir)
        self.eat   = self._load("eat.wav", 0.65)
        self.death = self._load("death.wav", 0.9)
        self.win   = self._load("win.wav", 0.9)
        self.music = self.sound_dir / "bgm.mp3"

    def _load(self, name, volume):
        path = self.sound_dir / name
        if not self.enabled or not path.exists():
            return None
        sound = pygame.mixer.Sound(str(path))
        sound.set_volume(volume)
        return sound

    def on_pellet_eaten(self):
        if self.eat: self.eat.play()

    def on_player_died(self):
        if self.death: self.death.play()

    def on_level_cleared(self):
        if self.win: self.win.play()

    def on_music_start(self):
        if not self.enabled or not self.music.exists():
            return
        pygame.mixer.music.load(str(self.music))
        pygame.mixer.music.set_volume(0.4)
        pygame.mixer.music.play(-1)

    def on_music_stop(self):
        if self.enabled:
            pygame.mixer.music.stop()


# ══════════════════════════════════════════════════════════════════════════════
#  Janela
# ══════════════════════════════════════════════════════════════════════════════
class MazeChaseApp:
    def __init__(self, config: GameConfig, start_level=None, name=None):
        pygame.init()
        self.config = config
        self.cell = config.cell_size
        self.width = config.cols * self.cell
        self.height = config.rows * self.cell + HUD_H
        self.screen = pygame.display.set_mode([self.width, self.height])
        pygame.display.set_caption("Maze Chase")
        self.timer = pygame.time.Clock()
        self.font = pygame.font.Font(None, 26)
        self.big_font = pygame.font.Font(None, 40)

        self.session = SessionController(
            leaderboard=Leaderboard(config.leaderboard_path),
            listener=PygameSoundCues(),
            config=config,
        )
        self.name_buffer = name or ""
        self.asking_name = name is None
        self.show_leaderboard = False
        self.leaderboard_lines = []
        self.pending_level = start_level
        if not self.asking_name:
            self._confirm_name()

    # ── Eventos ──────────────────────────────────────────────────────────────
    def _confirm_name(self):
        self.session.player_name = self.name_buffer.strip() or self.config.default_player_name
        self.asking_name = False
        if self.pending_level is not None:
            self.session.start_game(self.pending_level)
            self.pending_level = None

    def _handle_keydown(self, event):
        status = self.session.current_status()
        if self.asking_name:
            if event.key == pygame.K_RETURN:
                self._confirm_name()
            elif event.key == pygame.K_BACKSPACE:
                self.name_buffer = self.name_buffer[:-1]
            elif event.unicode.isprintable() and len(self.name_buffer) < 16:
                self.name_buffer += event.unicode
            return True

        if status is Status.PLAYING:
            if event.key in KEY_DIRECTIONS:
                self.session.set_desired_direction(*KEY_DIRECTIONS[event.key])
            elif event.key == pygame.K_ESCAPE:
                self.session.return_to_menu()
        elif status is Status.WON:
            if event.key == pygame.K_n:
                self.session.next_level()
            elif event.key == pygame.K_m:
                self.session.return_to_menu()
        elif status is Status.LOST:
            if event.key == pygame.K_r:
                self.session.retry_level()
            elif event.key == pygame.K_m:
                self.session.return_to_menu()
        else:
            if event.key in LEVEL_KEYS:
                self.show_leaderboard = False
                self.session.start_game(LEVEL_KEYS[event.key])
            elif event.key == pygame.K_l:
                self.toggle_leaderboard()
            elif event.key == pygame.K_ESCAPE:
                return False
        return True

    def toggle_leaderboard(self):
        """Show or hide the leaderboard panel; the file is read only when it opens."""
        self.show_leaderboard = not self.show_leaderboard
        if self.show_leaderboard:
            entries = self.session.leaderboard.top(self.config.leaderboard_limit)
            self.leaderboard_lines = format_leaderboard(entries, self.config.leaderboard_limit)

    def _handle_keyup(self, event):
        if event.key in KEY_DIRECTIONS and self.session.current_status() is Status.PLAYING:
            self.session.clear_desired_direction()

    # ── Desenho ──────────────────────────────────────────────────────────────
    def _block(self, cell, color):
        x, y = cell
        pygame.draw.rect(self.screen, color, [x * self.cell, HUD_H + y * self.cell, self.cell, self.cell])

    def _draw_board(self, frame):
        for cell in frame.walls:
            self._block(cell, "darkblue")
        dot = self.cell // 4
        for x, y in frame.pellets:
            sx = x * self.cell + (self.cell - dot) // 2
            sy = HUD_H + y * self.cell + (self.cell - dot) // 2
            pygame.draw.rect(self.screen, "white", [sx, sy, dot, dot])
        for cell, color in frame.enemies:
            self._block(cell, color)

    def _draw_player(self, frame):
        self._block(frame.player, "yellow")
        if not frame.mouth_open:
            return
        # Boca em cunha apontando para onde o jogador olha
        cx = frame.player[0] * self.cell + self.cell / 2
        cy = HUD_H + frame.player[1] * self.cell + self.cell / 2
        fx, fy = frame.facing
        half = self.cell / 2
        side_x, side_y = -fy * half * 0.6, fx * half * 0.6
        tip_x, tip_y = cx + fx * half, cy + fy * half
        pygame.draw.polygon(self.screen, "black", [
            (cx, cy), (tip_x + side_x, tip_y + side_y), (tip_x - side_x, tip_y - side_y),
        ])

    def _draw_hud(self, frame):
        pygame.draw.rect(self.screen, (46, 46, 46), [0, 0, self.width, HUD_H])
        for text, color, x in [
            (f"SCORE: {frame.score:04d}", "yellow", 10),
            (f"LIVES: {frame.lives}", "red", 230),
            (f"LEVEL: {frame.level}", "dodgerblue", 420),
        ]:
            self.screen.blit(self.font.render(text, True, color), (x, 16))

    def _draw_panel(self, lines, color="white"):
        pygame.draw.rect(self.screen, "white", [40, 150, self.width - 80, 330], 0, 10)
        pygame.draw.rect(self.screen, (17, 17, 17), [50, 160, self.width - 100, 310], 0, 10)
        for i, line in enumerate(lines):
            font = self.big_font if i == 0 else self.font
            self.screen.blit(font.render(line, True, color if i == 0 else "white"), (70, 180 + i * 34))

    def _draw_overlay(self, frame):
        if self.asking_name:
            self._draw_panel(["Enter Name", self.name_buffer + "_", "", "Enter to confirm"])
        elif frame.status is Status.LEVEL_SELECT:
            if self.show_leaderboard:
                self._draw_panel(["Leaderboard"] + self.leaderboard_lines, "gold")
            else:
                levels = " ".join(str(i) for i in self.session.list_levels())
                lines = ["Select Level", f"Keys: {levels}", "L: leaderboard", "Esc: exit"]
                if self.session.game_completed:
                    lines.append("You cleared all levels! Game complete!")
                self._draw_panel(lines)
        elif frame.status is Status.WON:
            self._draw_panel([f"Level {frame.level} cleared!", f"Score: {frame.score}",
                              "N: next level", "M: menu"], "green")
        elif frame.status is Status.LOST:
            self._draw_panel(["Game Over", f"Final score: {frame.score}",
                              "R: retry level", "M: menu"], "red")

    # ── Loop ─────────────────────────────────────────────────────────────────
    def run(self):
        running = True
        while running:
            elapsed = self.timer.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_keydown(event)
                elif event.type == pygame.KEYUP:
                    self._handle_keyup(event)

            self.session.update(elapsed)

            frame = self.session.render_frame()
            self.screen.fill("black")
            self._draw_hud(frame)
            if frame.status is not Status.LEVEL_SELECT:
                self._draw_board(frame)
                self._draw_player(frame)
            self._draw_overlay(frame)
            pygame.display.flip()

        self.session.stop_game()
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tile-based maze-chase arcade game.")
    parser.add_argument("--leaderboard", default=GameConfig.leaderboard_path,
                        help="leaderboard file (default: %(default)s)")
    parser.add_argument("--level", type=int, default=None, help="start directly on this level")
    parser.add_argument("--name", default=None, help="player name (skips the name prompt)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig(leaderboard_path=args.leaderboard)
    MazeChaseApp(config, start_level=args.level, name=args.name).run()
