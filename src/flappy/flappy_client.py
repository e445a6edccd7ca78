#!/usr/bin/env python3
"""
flappy_client.py

pygame driver: turns keyboard/mouse events into flap and pause inputs,
ticks the run controller once per frame and draws the world snapshot.
"""

import logging
from typing import Optional

import pygame

from .audio import AudioCues
from .config import GameConfig
from .constants import RENDER_FPS, GROUND_TILE_WIDTH
from .physics_world import RunState, WorldSnapshot
from .ranking import RankingNameError
from .run_controller import RunController

PIPE_COLORS = {
    "green": (45, 154, 58),
    "red": (196, 60, 40),
}
# downflap, midflap, upflap
BIRD_COLORS = [(230, 200, 0), (255, 230, 0), (255, 245, 120)]
SKY = (112, 197, 206)
GROUND = (222, 216, 149)
GROUND_STRIPE = (120, 190, 60)
WHITE = (255, 255, 255)
GREY = (200, 200, 200)
RED = (255, 50, 50)


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None):
        pygame.init()
        self.config = config or GameConfig.from_env()
        self.screen = pygame.display.set_mode((self.config.screen_width, self.config.screen_height))
        pygame.display.set_caption("Flappy")

        self.audio = AudioCues(self.config.sound_dir)
        self.controller = RunController(self.config, audio=self.audio)
        self.clock = pygame.time.Clock()

        # Game-over screen state
        self.name_input = ""
        self.name_error = ""
        self.ranking_saved = False

        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 24)

    def run(self):
        """The main client execution loop."""
        print(f"Best score so far: {self.controller.high_score}")

        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._flap()

            result = self.controller.tick()
            if result.terminal:
                print(f"Game over. Score: {result.score} | Best: {self.controller.high_score}")

            self._draw(self.controller.snapshot())

        self.controller.close()
        pygame.quit()

    def _flap(self):
        if self.controller.state is RunState.ENDED:
            self._reset_name_entry()
        self.controller.flap()

    def _handle_key(self, event) -> bool:
        """Returns False when the player asked to quit."""
        if event.key == pygame.K_ESCAPE:
            return False

        # Game over: typed characters go to the ranking name until it is saved
        if self.controller.state is RunState.ENDED and not self.ranking_saved:
            self._edit_name(event)
            return True

        if event.key == pygame.K_SPACE:
            self._flap()
        elif event.key == pygame.K_p:
            self.controller.toggle_pause()
        elif event.key == pygame.K_m:
            enabled = self.audio.toggle()
            print(f"Sound {'on' if enabled else 'off'}")
        return True

    def _edit_name(self, event):
        if event.key == pygame.K_RETURN:
            try:
                self.controller.submit_ranking(self.name_input)
                self.ranking_saved = True
                self.name_error = ""
            except RankingNameError:
                self.name_error = "Type a name first"
        elif event.key == pygame.K_TAB:
            self.ranking_saved = True
        elif event.key == pygame.K_BACKSPACE:
            self.name_input = self.name_input[:-1]
        elif event.unicode and event.unicode.isprintable():
            self.name_input += event.unicode

    def _reset_name_entry(self):
        self.name_input = ""
        self.name_error = ""
        self.ranking_saved = False

    # -------- Rendering --------

    def _blit_centered(self, text: str, font, color, y: int):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (self.config.screen_width // 2 - surf.get_width() // 2, y))

    def _draw(self, snap: WorldSnapshot):
        """Renders the snapshot with plain shapes."""
        screen = self.screen
        width = self.config.screen_width
        screen.fill(SKY)

        # Pipes
        for pipe in snap.pipes:
            color = PIPE_COLORS.get(pipe["variant"], PIPE_COLORS["green"])
            pygame.draw.rect(screen, color, pipe["top"])
            pygame.draw.rect(screen, color, pipe["bottom"])

        # Ground strip, scrolled
        ground_y = int(snap.ground_y)
        pygame.draw.rect(screen, GROUND, (0, ground_y, width, self.config.screen_height - ground_y))
        for i in range(-1, width // GROUND_TILE_WIDTH + 2):
            x = snap.base_scroll + i * GROUND_TILE_WIDTH
            for stripe in range(0, GROUND_TILE_WIDTH, 24):
                pygame.draw.rect(screen, GROUND_STRIPE, (x + stripe, ground_y, 12, 12))

        # Bird
        pygame.draw.rect(screen, BIRD_COLORS[snap.bird_anim % len(BIRD_COLORS)], snap.bird)

        # HUD
        if snap.state is not RunState.IDLE:
            self._blit_centered(str(snap.score), self.large_font, WHITE, 60)

        if snap.state is RunState.IDLE:
            self._blit_centered("Space / Click to start", self.font, WHITE, self.config.screen_height // 3)
            self._blit_centered("P = pause | M = sound", self.font, GREY, self.config.screen_height // 3 + 55)
            self._blit_centered(f"Best: {self.controller.high_score}", self.font, GREY,
                                self.config.screen_height // 3 + 30)
        elif snap.state is RunState.PAUSED:
            self._blit_centered("Paused (P)", self.large_font, WHITE, self.config.screen_height // 3)
        elif snap.state is RunState.ENDED:
            self._draw_game_over(snap)

        pygame.display.flip()

    def _draw_game_over(self, snap: WorldSnapshot):
        y = self.config.screen_height // 5
        self._blit_centered("Game Over", self.large_font, RED, y)
        self._blit_centered(f"Score: {snap.score}   Best: {self.controller.high_score}", self.font, WHITE, y + 50)

        if not self.ranking_saved:
            self._blit_centered(f"Name: {self.name_input}_", self.font, WHITE, y + 90)
            self._blit_centered("Enter = save | Tab = skip", self.font, GREY, y + 115)
            if self.name_error:
                self._blit_centered(self.name_error, self.font, RED, y + 140)
            return

        self._blit_centered("Ranking", self.font, WHITE, y + 90)
        for i, entry in enumerate(self.controller.list_ranking()):
            self._blit_centered(f"{i + 1}. {entry.name} - {entry.score}", self.font, WHITE, y + 115 + i * 24)
        self._blit_centered("Space / Click to play again", self.font, GREY, self.config.screen_height - 150)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    client = FlappyClient()
    client.run()


if __name__ == "__main__":
    main()
