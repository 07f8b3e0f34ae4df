# flappy_dragon/player.py
# Player: cai com a gravidade e "bate as asas" para subir.
# - só y evolui; x fica fixo na coluna de criação
# - y é sempre mantido dentro de [0, SCREEN_HEIGHT]

import pygame

from flappy_dragon.config import SCREEN_HEIGHT, GRAVITY, FLAP_STRENGTH


class Player:
    def __init__(self, x, y):
        # pos em float para movimento suave; velocity em unidades/passo
        self.pos = pygame.math.Vector2(x, y)
        self.velocity = 0.0

    @property
    def x(self):
        return self.pos.x

    @property
    def y(self):
        return self.pos.y

    @property
    def x_cell(self):
        """Coluna inteira ocupada pelo player (usada nas colisões)."""
        return int(self.pos.x)

    def apply_gravity_and_move(self):
        """Um passo de física: gravidade, deslocamento e clamping na tela."""
        self.velocity += GRAVITY
        self.pos.y += self.velocity

        # bateu no teto: perde o impulso para cima
        if self.pos.y < 0:
            self.pos.y = 0.0
            self.velocity = 0.0

        # no chão só limitamos a posição; a morte é decidida pelo GameState
        if self.pos.y > SCREEN_HEIGHT:
            self.pos.y = float(SCREEN_HEIGHT)

    def flap(self):
        # sobrescreve a velocidade atual, não acumula
        self.velocity = FLAP_STRENGTH
