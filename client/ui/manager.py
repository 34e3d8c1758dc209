"""
Purpose: UIManager for the window layout: title, image area, result label, role buttons.
Dependencies: pygame, core.config, client/ui/widgets.py, client/render/hero_renderer.py.
Client Only: Layout and drawing; picking is done by the callbacks it is given.
"""

import pygame
from typing import Callable, Dict, List, Sequence
from core.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, BG_COLOR, FONT_NAME,
    TITLE_FONT_SIZE, RESULT_FONT_SIZE, BUTTON_FONT_SIZE, IMAGE_TEXT_FONT_SIZE,
    TITLE_RECT, IMAGE_AREA_RECT, RESULT_RECT, IMAGE_DIR,
    BUTTON_PADDING, BUTTON_SPACING, BUTTON_BOTTOM_MARGIN, PROMPT_TEXT,
)
from client.ui.widgets import Label, Button
from client.render.hero_renderer import HeroRenderer


def layout_buttons(buttons: Sequence[Button], screen_width=SCREEN_WIDTH, screen_height=SCREEN_HEIGHT,
                   padding=BUTTON_PADDING, spacing=BUTTON_SPACING, bottom_margin=BUTTON_BOTTOM_MARGIN):
    """
    Size all buttons uniformly and center them as a group near the bottom edge.
    - Width: widest natural width plus padding, so they look uniform even if text lengths differ.
    - Height: tallest natural height, to avoid clipping.
    """
    if not buttons:
        return
    sizes = [button.natural_size() for button in buttons]
    uniform_w = max(w for w, _ in sizes) + padding
    uniform_h = max(h for _, h in sizes)

    total_w = uniform_w * len(buttons) + spacing * (len(buttons) - 1)
    start_x = (screen_width - total_w) // 2
    y = screen_height - uniform_h - bottom_margin

    for i, button in enumerate(buttons):
        button.rect = pygame.Rect(start_x + (uniform_w + spacing) * i, y, uniform_w, uniform_h)


class UIManager:
    def __init__(self, screen: pygame.Surface, roles: Sequence[str], on_role: Callable[[str], None],
                 image_dir=IMAGE_DIR):
        self.screen = screen
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)
        self.result_font = pygame.font.SysFont(FONT_NAME, RESULT_FONT_SIZE)
        self.button_font = pygame.font.SysFont(FONT_NAME, BUTTON_FONT_SIZE)
        self.image_font = pygame.font.SysFont(FONT_NAME, IMAGE_TEXT_FONT_SIZE)

        self.title = Label(WINDOW_TITLE, self.title_font, TITLE_RECT)
        self.hero_renderer = HeroRenderer(IMAGE_AREA_RECT, self.image_font, image_dir=image_dir)
        self.result_label = Label(PROMPT_TEXT, self.result_font, RESULT_RECT)

        self.buttons: List[Button] = []
        self.role_buttons: Dict[str, Button] = {}
        for role in roles:
            # Default arg binds each button to its own role
            button = Button(role, self.button_font, on_click=lambda r=role: on_role(r))
            self.buttons.append(button)
            self.role_buttons[role] = button
        layout_buttons(self.buttons, screen.get_width(), screen.get_height())

    def button_at(self, pos):
        for button in self.buttons:
            if button.contains(pos):
                return button
        return None

    def update_hover(self, pos):
        for button in self.buttons:
            button.hovered = button.contains(pos)

    def draw(self):
        self.screen.fill(BG_COLOR)
        self.title.draw(self.screen)
        self.hero_renderer.draw(self.screen)
        self.result_label.draw(self.screen)
        for button in self.buttons:
            button.draw(self.screen)

# Usage: ui = UIManager(screen, ROLES, app.show_random_hero); ui.draw()
