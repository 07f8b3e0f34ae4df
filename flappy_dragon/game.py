# flappy_dragon/game.py
# Máquina de estados do jogo (Menu / Playing / End).
# Não desenha nada: o front-end (display.py) chama tick() a cada frame com o
# tempo decorrido e o comando lido do teclado, e desenha a partir de view().
#
# A física roda em passos fixos de FRAME_DURATION ms, independente do FPS.

import enum
import random
from collections import namedtuple

from flappy_dragon.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, PLAYER_START_X, PLAYER_START_Y,
)
from flappy_dragon.player import Player
from flappy_dragon.obstacle import Obstacle


class GameMode(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class Command(enum.Enum):
    FLAP = "flap"
    START = "start"
    QUIT = "quit"


# o que o front-end precisa para desenhar um frame
RenderView = namedtuple(
    "RenderView",
    ["mode", "score", "player_cell", "player_y", "obstacle_column", "top_band", "bottom_band"],
)


class GameState:
    def __init__(self, rng=None):
        # rng: fonte aleatória compartilhada pelos obstáculos (seed nos testes)
        self.rng = rng if rng is not None else random.Random()
        self.mode = GameMode.MENU
        self.score = 0
        self.frame_time = 0.0
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.obstacle = Obstacle.create(SCREEN_WIDTH, 0, self.rng)
        # True quando o jogador pediu para sair; o loop externo encerra o processo
        self.quitting = False

    def restart(self):
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        self.obstacle = Obstacle.create(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.PLAYING
        self.score = 0

    # ----------------- tick -----------------
    def tick(self, elapsed_ms, command=None):
        """Avança um frame. command fora de Command é ignorado."""
        if not isinstance(command, Command):
            command = None

        if self.mode is GameMode.MENU:
            self._menu(command)
        elif self.mode is GameMode.PLAYING:
            self._play(elapsed_ms, command)
        elif self.mode is GameMode.END:
            self._dead(command)

    def _menu(self, command):
        if command is Command.START:
            self.restart()
        elif command is Command.QUIT:
            self.quitting = True

    def _dead(self, command):
        if command is Command.START:
            self.restart()
        elif command is Command.QUIT:
            self.quitting = True

    def _play(self, elapsed_ms, command):
        self.frame_time += elapsed_ms

        # no máximo um passo de física por tick; sobra menos de um passo
        # (um frame longo não gera fila de passos atrasados)
        if self.frame_time > FRAME_DURATION:
            self.frame_time %= FRAME_DURATION
            self.player.apply_gravity_and_move()
            self.obstacle.advance()

        if command is Command.FLAP:
            self.player.flap()

        # passou do obstáculo: pontua e gera outro com gap novo
        if self.player.x_cell > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.create(SCREEN_WIDTH, self.score, self.rng)

        if self.obstacle.is_hit(self.player) or self.player.y >= SCREEN_HEIGHT:
            self.mode = GameMode.END

    # ----------------- render view -----------------
    def view(self):
        column, top_band, bottom_band = self.obstacle.render_bounds(self.player.x_cell)
        return RenderView(
            mode=self.mode,
            score=self.score,
            player_cell=self.player.x_cell,
            player_y=self.player.y,
            obstacle_column=column,
            top_band=top_band,
            bottom_band=bottom_band,
        )
