"""
Purpose: Load, scale and draw the selected hero's image inside the display area.
Dependencies: pygame, os, core/config.py, core/images.py.
Ext Hooks: Cache scaled surfaces per hero if loading ever gets slow.
Client Only: All visuals.
"""

import os
import pygame
from core.config import (
    IMAGE_DIR, IMAGE_EXT, IMAGE_AREA_BG, IMAGE_AREA_BORDER, TEXT_COLOR,
    NO_IMAGE_TEXT, BAD_IMAGE_TEXT,
)
from core.images import hero_image_path, fit_within, center_in


class HeroRenderer:
    def __init__(self, rect, font, image_dir=IMAGE_DIR, ext=IMAGE_EXT):
        self.rect = pygame.Rect(rect)
        self.font = font
        self.image_dir = image_dir
        self.ext = ext
        self.image = None  # Scaled pygame.Surface, or None
        self.text = ""     # Fallback text shown when there is no image

    def clear(self):
        self.image = None
        self.text = ""

    def set_hero_image(self, hero):
        """
        Load the hero's image from disk and scale it to fit the display area.
        Missing or unreadable files leave the image cleared and set a fallback message.
        Passing None clears both image and text.
        """
        if hero is None:
            self.clear()
            return

        # Filename must match the hero string exactly (case, punctuation, spacing)
        path = hero_image_path(hero, self.image_dir, self.ext)
        if not os.path.exists(path):
            print(f"Warning: Hero image not found at {path}.")
            self.image = None
            self.text = NO_IMAGE_TEXT.format(hero=hero)
            return

        try:
            original = pygame.image.load(path)
        except (FileNotFoundError, pygame.error) as e:
            print(f"Warning: Could not load hero image {path}: {e}")
            self.image = None
            self.text = BAD_IMAGE_TEXT.format(hero=hero)
            return

        if pygame.display.get_surface() is not None:
            original = original.convert_alpha()

        self.image = self._scale(original, fit_within(original.get_size(), self.rect.size))
        self.text = ""

    @staticmethod
    def _scale(surface, size):
        # smoothscale only handles 24/32-bit surfaces (e.g. not paletted PNGs)
        if surface.get_bitsize() in (24, 32):
            return pygame.transform.smoothscale(surface, size)
        return pygame.transform.scale(surface, size)

    def image_pos(self):
        """Top-left blit position that centers the current image in the area."""
        if self.image is None:
            return None
        return center_in(self.image.get_size(), tuple(self.rect))

    def draw(self, screen):
        pygame.draw.rect(screen, IMAGE_AREA_BG, self.rect)
        pygame.draw.rect(screen, IMAGE_AREA_BORDER, self.rect, 1)
        if self.image is not None:
            screen.blit(self.image, self.image_pos())
        elif self.text:
            text_surface = self.font.render(self.text, True, TEXT_COLOR)
            screen.blit(text_surface, text_surface.get_rect(center=self.rect.center))

# Usage: renderer = HeroRenderer(IMAGE_AREA_RECT, font); renderer.set_hero_image("Genji"); renderer.draw(screen)
