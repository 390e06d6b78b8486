import types

import pygame
import pytest
from mazechase.config import GameConfig
from mazechase.env.board import Level
from mazechase.env.leaderboard import Leaderboard
from mazechase.env.session import SessionController
from mazechase.frontend import MazeChaseApp

# ======================================================================
# FIXTURES (frontend sem janela)
# ======================================================================

class CountingLeaderboard(Leaderboard):
    def __init__(self, path):
        super().__init__(path)
        self.reads = 0

    def load(self):
        self.reads += 1
        return super().load()


@pytest.fixture
def placar(tmp_path):
    placar = CountingLeaderboard(tmp_path / "leaderboard.txt")
    placar.save("Alice", 120)
    placar.save("Bob", 90)
    placar.reads = 0
    return placar

@pytest.fixture
def app(placar):
    """MazeChaseApp montado sem pygame.init: só o estado que o menu usa."""
    config = GameConfig(rows=3, cols=7)
    app = MazeChaseApp.__new__(MazeChaseApp)
    app.config = config
    app.session = SessionController((Level(1, [], ()),), placar, config=config)
    app.asking_name = False
    app.show_leaderboard = False
    app.leaderboard_lines = []
    app.panels = []
    app._draw_panel = lambda lines, color="white": app.panels.append(lines)
    return app

def tecla(key):
    return types.SimpleNamespace(key=key, unicode="")

# ======================================================================
# PAINEL DO PLACAR
# ======================================================================

def test_placar_lido_uma_vez_ao_abrir(app, placar):
    app._handle_keydown(tecla(pygame.K_l))
    assert app.show_leaderboard
    assert placar.reads == 1

    frame = app.session.render_frame()
    for _ in range(60):
        app._draw_overlay(frame)
    assert placar.reads == 1
    assert app.panels[-1] == ["Leaderboard", "1. Alice - 120", "2. Bob - 90"]

def test_fechar_placar_nao_le_arquivo(app, placar):
    app._handle_keydown(tecla(pygame.K_l))
    app._handle_keydown(tecla(pygame.K_l))
    assert not app.show_leaderboard
    assert placar.reads == 1

    app._draw_overlay(app.session.render_frame())
    assert app.panels[-1][0] == "Select Level"

def test_reabrir_placar_mostra_pontos_novos(app, placar):
    app.toggle_leaderboard()
    app.toggle_leaderboard()
    placar.save("Carl", 300)
    app.toggle_leaderboard()
    assert placar.reads == 2
    assert app.leaderboard_lines[0] == "1. Carl - 300"
