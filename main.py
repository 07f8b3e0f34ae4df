# Ponto de entrada do jogo
# Mantemos esse arquivo mínimo; as opções e o loop ficam em flappy_dragon/.

from flappy_dragon.cli import main

if __name__ == "__main__":
    main()
