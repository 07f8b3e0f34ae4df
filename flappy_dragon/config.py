# flappy_dragon/config.py
# Constantes do jogo. O campo é uma grade de SCREEN_WIDTH x SCREEN_HEIGHT células;
# a física anda em passos fixos de FRAME_DURATION ms.

# ---------- grade ----------
SCREEN_WIDTH = 50
SCREEN_HEIGHT = 30

# ---------- física ----------
FRAME_DURATION = 100.0   # ms por passo de física
GRAVITY = 0.15           # somado à velocidade a cada passo
FLAP_STRENGTH = -1.5     # negativo = para cima (y cresce para baixo)

PLAYER_START_X = 5.0
PLAYER_START_Y = 20.0

# ---------- obstáculos ----------
GAP_CENTER_MIN = 10
GAP_CENTER_MAX = 30      # exclusivo
GAP_SIZE_START = 20
GAP_SIZE_MIN = 2

# ---------- janela (pygame) ----------
CELL_SIZE = 16           # px por célula
FPS = 60
WINDOW_TITLE = "Flappy Dragon"
FONT_NAME = "consolas"
