# flappy_dragon/display.py
# Front-end em Pygame: abre a janela em grade, lê o teclado, mede o tempo
# entre frames e desenha a tela de cada modo a partir de GameState.view().
#
# Controles:
#   SPACE : bater asas
#   P     : jogar / jogar de novo
#   Q     : sair (no menu e na tela de fim)

import random
import pygame

from flappy_dragon.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, FPS, WINDOW_TITLE, FONT_NAME,
)
from flappy_dragon.game import GameState, GameMode, Command

BLACK = (0, 0, 0)
NAVY = (0, 0, 128)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)

KEY_COMMANDS = {
    pygame.K_SPACE: Command.FLAP,
    pygame.K_p: Command.START,
    pygame.K_q: Command.QUIT,
}


def translate_event(event):
    """Converte um evento do pygame em Command (ou None se não interessa)."""
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None


class Game:
    def __init__(self, seed=None, cell_size=CELL_SIZE, fps=FPS):
        pygame.init()

        # janela e clock (falha aqui é fatal e sobe para o chamador)
        self.cell_size = cell_size
        self.fps = fps
        self.screen = pygame.display.set_mode((SCREEN_WIDTH * cell_size, SCREEN_HEIGHT * cell_size))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        try:
            self.font = pygame.font.SysFont(FONT_NAME, cell_size)
        except Exception as e:
            print(f"Aviso: fonte {FONT_NAME} indisponível, usando a padrão: {e}")
            self.font = pygame.font.Font(None, cell_size)

        self.state = GameState(rng=random.Random(seed))

    # ----------------- main loop -----------------
    def run(self):
        while self.running:
            elapsed = self.clock.tick(self.fps)
            self.frame(elapsed)
        self.quit()

    def frame(self, elapsed_ms):
        command = self.poll_input()
        previous_mode = self.state.mode
        self.state.tick(elapsed_ms, command)
        if previous_mode is GameMode.PLAYING and self.state.mode is GameMode.END:
            print(f"Fim de jogo! Pontuação: {self.state.score}")
        if self.state.quitting:
            self.running = False
            return
        self.draw()

    # ----------------- input -----------------
    def poll_input(self):
        """Lê a fila de eventos; só o primeiro comando do frame vale."""
        command = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                # fechar a janela encerra em qualquer modo
                self.running = False
            translated = translate_event(event)
            if command is None and translated is not None:
                command = translated
        return command

    # ----------------- draw -----------------
    def draw(self):
        view = self.state.view()
        if view.mode is GameMode.MENU:
            self._draw_menu()
        elif view.mode is GameMode.PLAYING:
            self._draw_playing(view)
        else:
            self._draw_dead(view)
        pygame.display.flip()

    def _draw_menu(self):
        self.screen.fill(BLACK)
        self._print_centered(5, "Welcome to Flappy Dragon", WHITE)
        self._print(0, 8, "(P) Play Game", YELLOW)
        self._print(0, 9, "(Q) Quit Game", YELLOW)

    def _draw_playing(self, view):
        self.screen.fill(NAVY)

        self._set_cell(view.player_cell, int(view.player_y), YELLOW)
        for row in view.top_band:
            self._set_cell(view.obstacle_column, row, RED)
        for row in view.bottom_band:
            self._set_cell(view.obstacle_column, row, RED)

        self._print(0, 0, "Press SPACE to flap.", WHITE)
        self._print(0, 1, f"Score: {view.score}", WHITE)

    def _draw_dead(self, view):
        self.screen.fill(BLACK)
        self._print_centered(5, "You are dead", WHITE)
        self._print_centered(6, f"You earned {view.score} points", WHITE)
        self._print(0, 8, "(P) Play again", RED)
        self._print(0, 9, "(Q) Quit Game", RED)

    # ----------------- grid helpers -----------------
    def _set_cell(self, col, row, color):
        # fora da grade não desenha (ex.: y == SCREEN_HEIGHT no chão)
        if not (0 <= col < SCREEN_WIDTH and 0 <= row < SCREEN_HEIGHT):
            return
        size = self.cell_size
        pygame.draw.rect(self.screen, color, (col * size, row * size, size, size))

    def _print(self, col, row, text, color):
        surf = self.font.render(text, True, color)
        self.screen.blit(surf, (col * self.cell_size, row * self.cell_size))

    def _print_centered(self, row, text, color):
        surf = self.font.render(text, True, color)
        center_x = SCREEN_WIDTH * self.cell_size // 2
        center_y = row * self.cell_size + self.cell_size // 2
        self.screen.blit(surf, surf.get_rect(center=(center_x, center_y)))

    def quit(self):
        pygame.quit()
