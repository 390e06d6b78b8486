"""Game configuration defaults."""
from dataclasses import dataclass

from mazechase.env import board


@dataclass
class GameConfig:
    # Tabuleiro
    rows: int = board.ROWS
    cols: int = board.COLS
    cell_size: int = 25
    player_start: tuple = (1, 1)

    # Regras
    tick_ms: int = 120
    start_lives: int = 3
    pellet_points: int = 10

    # Sessão / placar
    default_player_name: str = "Player"
    leaderboard_path: str = "leaderboard.txt"
    leaderboard_limit: int = 10
