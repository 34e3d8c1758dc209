"""
Purpose: Main window for the hero generator - picks a random hero per role and shows name + image.
Dependencies: client/ui/manager.py, client/input_handler.py, client/app_state.py, core/selector.py, core/heroes.py, core/config.py, pygame.
Ext Hooks: "Random (Any Role)" button; history panel of recent picks.
Client Only: Window, input and visuals.

This file contains the main loop and handles:
- Window setup (fixed size, not resizable)
- Role button actions
- Updating the name label and image area after each pick
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame
from core.config import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, FPS, IMAGE_DIR
from core.heroes import HERO_POOLS, ROLES
from core.selector import pick_hero
from client.app_state import HeroState
from client.ui.manager import UIManager
from client.input_handler import InputHandler


class HeroGeneratorApp:
    """
    Owns the window and wires the role buttons to the hero pools.
    Everything runs on the pygame event loop; a click updates state synchronously.
    """

    def __init__(self, pools=None, image_dir=IMAGE_DIR, rng=None):
        """
        Args:
            pools: role -> list of hero names; defaults to HERO_POOLS
            image_dir: folder holding <hero>.png files
            rng: optional random.Random for reproducible picks
        """
        pygame.init()
        pygame.font.init()

        # No RESIZABLE flag: the layout is fixed
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.pools = HERO_POOLS if pools is None else pools
        self.rng = rng
        self.state = HeroState()

        roles = [role for role in ROLES if role in self.pools]
        self.ui = UIManager(self.screen, roles, self.show_random_hero, image_dir=image_dir)
        self.input_handler = InputHandler(self.ui, self.show_random_hero, self.quit)

        print(f"Window: {SCREEN_WIDTH}x{SCREEN_HEIGHT}, image folder: {image_dir}")
        print(f"Roles: {', '.join(f'{role} ({len(self.pools[role])})' for role in roles)}")

        self.running = True

    def show_random_hero(self, role):
        """Pick a random hero for the role and update the name label and image area."""
        if role not in self.pools:
            raise ValueError(f"Invalid role: {role}")

        hero = pick_hero(self.pools[role], self.rng)
        self.state.record_pick(role, hero)
        self.ui.result_label.set_text(self.state.result_text)

        # Empty pool clears the image; otherwise load it by name
        self.ui.hero_renderer.set_hero_image(hero)
        print(f"{role}: {self.state.result_text}")

    def quit(self):
        self.running = False

    def handle_events(self):
        for event in pygame.event.get():
            self.input_handler.handle_event(event)

    def draw(self):
        self.ui.draw()

    def run(self):
        """Main loop."""
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            self.draw()
            pygame.display.flip()
        pygame.quit()


def main():
    """Main entry point; no command-line arguments are used."""
    app = HeroGeneratorApp()
    app.run()


if __name__ == "__main__":
    main()
