import os

# janela/áudio "fantasmas" para rodar o front-end sem display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy_dragon.player import Player


class FixedRandom:
    """Fonte aleatória que sempre devolve o mesmo valor e guarda as chamadas."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, low, high):
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom(20)


@pytest.fixture
def make_player():
    def _make(y=20.0, x=5.0, velocity=0.0):
        player = Player(x, y)
        player.velocity = velocity
        return player
    return _make
