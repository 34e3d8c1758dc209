"""
Utility script to generate placeholder hero images, one PNG per hero name.
Gives the generator something to show before real artwork is dropped into images/.
Dependencies: pygame, os, core/heroes.py, core/images.py.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame
from core.config import IMAGE_DIR
from core.heroes import HERO_POOLS, ROLES
from core.images import hero_image_path

ROLE_COLORS = {
    "Tank": (70, 130, 180),
    "Damage": (200, 70, 60),
    "Support": (90, 160, 90),
}

IMAGE_SIZE = (320, 400)


def draw_placeholder(hero, color, size=IMAGE_SIZE):
    """Solid card in the role colour with the hero name across the middle."""
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color)
    rect = surface.get_rect()
    pygame.draw.rect(surface, (255, 255, 255), rect, 6)
    pygame.draw.circle(surface, (255, 255, 255), (rect.centerx, rect.height // 3), rect.width // 5)

    font = pygame.font.SysFont('Verdana', 28, bold=True)
    text = font.render(hero, True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(rect.centerx, rect.height * 2 // 3)))
    return surface


def generate_placeholders(output_dir=IMAGE_DIR, pools=None, overwrite=False):
    """
    Write images/<hero>.png for every hero in the pools.

    Existing files are kept unless overwrite is True.

    Returns:
        list: Paths that were written.
    """
    pools = HERO_POOLS if pools is None else pools
    pygame.font.init()
    os.makedirs(output_dir, exist_ok=True)

    written = []
    for role in ROLES:
        color = ROLE_COLORS.get(role, (128, 128, 128))
        for hero in pools.get(role, []):
            output_path = hero_image_path(hero, output_dir)
            if os.path.exists(output_path) and not overwrite:
                continue
            pygame.image.save(draw_placeholder(hero, color), output_path)
            written.append(output_path)

    print(f"Generated {len(written)} placeholder images in {output_dir}")
    return written


if __name__ == '__main__':
    generate_placeholders()
