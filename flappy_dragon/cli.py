# flappy_dragon/cli.py
# Linha de comando do jogo: lê as opções e inicia o loop do pygame.

import argparse

from flappy_dragon.config import CELL_SIZE, FPS
from flappy_dragon.display import Game


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="flappy-dragon", description="Flappy Dragon")
    parser.add_argument("--seed", type=int, default=None, help="semente dos obstáculos")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="px por célula da grade")
    parser.add_argument("--fps", type=int, default=FPS, help="frames por segundo da janela")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    # Criamos a instância do jogo e chamamos run(), que contém o loop principal.
    game = Game(seed=args.seed, cell_size=args.cell_size, fps=args.fps)
    game.run()
