# flappy_dragon/obstacle.py
# Obstáculo com uma abertura (gap) vertical que se move para a esquerda.
# - gap_center sorteado em [GAP_CENTER_MIN, GAP_CENTER_MAX)
# - gap_size encolhe com a pontuação até GAP_SIZE_MIN
#
# A fonte aleatória é injetada (qualquer objeto com randrange(low, high)),
# assim os testes podem fixar a semente.

import random

from flappy_dragon.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    GAP_CENTER_MIN, GAP_CENTER_MAX, GAP_SIZE_START, GAP_SIZE_MIN,
)


def gap_size_for_score(score):
    return max(GAP_SIZE_MIN, GAP_SIZE_START - score)


class Obstacle:
    def __init__(self, x, gap_center, gap_size):
        self.x = x
        self.gap_center = gap_center
        self.gap_size = max(GAP_SIZE_MIN, gap_size)

    @classmethod
    def create(cls, start_x, score, rng=None):
        """Novo obstáculo em start_x com gap sorteado; maior score -> gap menor."""
        if rng is None:
            rng = random.Random()
        gap_center = rng.randrange(GAP_CENTER_MIN, GAP_CENTER_MAX)
        return cls(start_x, gap_center, gap_size_for_score(score))

    @property
    def half_size(self):
        # divisão inteira mantém o gap simétrico em torno do centro
        return self.gap_size // 2

    def advance(self):
        self.x -= 1
        # saiu pela esquerda: volta para a borda direita com o mesmo gap
        if self.x < 0:
            self.x = SCREEN_WIDTH

    def is_hit(self, player):
        cell = player.x_cell
        if not (self.x <= cell <= self.x + 1):
            return False
        above_gap = player.y < self.gap_center - self.half_size
        below_gap = player.y > self.gap_center + self.half_size
        return above_gap or below_gap

    def render_bounds(self, player_x):
        """
        Retorna (screen_x, top_band, bottom_band):
        - screen_x: coluna na tela (x relativo ao player)
        - top_band / bottom_band: ranges de linhas sólidas acima e abaixo do gap
        """
        screen_x = self.x - player_x
        top_band = range(0, self.gap_center - self.half_size)
        bottom_band = range(self.gap_center + self.half_size, SCREEN_HEIGHT)
        return screen_x, top_band, bottom_band

    def __repr__(self):
        return f"Obstacle(x={self.x}, gap_center={self.gap_center}, gap_size={self.gap_size})"
