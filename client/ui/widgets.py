"""
Purpose: Minimal drawn widgets (text label, push button) on top of pygame surfaces.
Dependencies: pygame, core/config.py.
Ext Hooks: Disabled state, focus ring for keyboard navigation.
Client Only: Drawing and hit-testing; actions are plain callables.
"""

import pygame
from core.config import (
    TEXT_COLOR, BUTTON_MARGIN, BUTTON_COLOR, BUTTON_HOVER_COLOR, BUTTON_BORDER_COLOR,
)


class Label:
    """Single line of text centered in a fixed rectangle."""

    def __init__(self, text, font, rect, color=TEXT_COLOR):
        self.text = text
        self.font = font
        self.rect = pygame.Rect(rect)
        self.color = color

    def set_text(self, text):
        self.text = text

    def draw(self, screen):
        if not self.text:
            return
        text_surface = self.font.render(self.text, True, self.color)
        screen.blit(text_surface, text_surface.get_rect(center=self.rect.center))


class Button:
    def __init__(self, text, font, on_click=None):
        self.text = text
        self.font = font
        self.on_click = on_click
        self.rect = pygame.Rect((0, 0), self.natural_size())
        self.hovered = False

    def natural_size(self):
        """Text size plus inner margins; what the button would like to be."""
        text_w, text_h = self.font.size(self.text)
        return text_w + BUTTON_MARGIN[0] * 2, text_h + BUTTON_MARGIN[1] * 2

    def contains(self, pos):
        return self.rect.collidepoint(pos)

    def click(self):
        if self.on_click is not None:
            self.on_click()

    def draw(self, screen):
        color = BUTTON_HOVER_COLOR if self.hovered else BUTTON_COLOR
        pygame.draw.rect(screen, color, self.rect, border_radius=3)
        pygame.draw.rect(screen, BUTTON_BORDER_COLOR, self.rect, 1, border_radius=3)
        text_surface = self.font.render(self.text, True, TEXT_COLOR)
        screen.blit(text_surface, text_surface.get_rect(center=self.rect.center))
