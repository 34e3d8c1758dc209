"""
Purpose: Handle user input events and translate them to generator actions.
Dependencies: pygame, client/ui/manager.py.
Ext Hooks: Future keybinds (e.g. any-role pick).
Client Only: Input handling only; no picking logic.
"""

import pygame

# Keyboard shortcuts per role
ROLE_KEYS = {
    pygame.K_t: "Tank",
    pygame.K_1: "Tank",
    pygame.K_d: "Damage",
    pygame.K_2: "Damage",
    pygame.K_s: "Support",
    pygame.K_3: "Support",
}


class InputHandler:
    """
    Handles pygame events for the generator window.
    Separates input dispatch from picking so the app stays thin.
    """

    def __init__(self, ui, on_role, on_quit):
        """
        Args:
            ui: UIManager owning the buttons
            on_role: callable taking a role name
            on_quit: callable closing the window
        """
        self.ui = ui
        self.on_role = on_role
        self.on_quit = on_quit

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.on_quit()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.handle_mouse_click(event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.ui.update_hover(event.pos)
        elif event.type == pygame.KEYDOWN:
            self.handle_keydown(event.key)

    def handle_mouse_click(self, pos):
        button = self.ui.button_at(pos)
        if button:
            button.click()

    def handle_keydown(self, key):
        if key == pygame.K_ESCAPE:
            self.on_quit()
        elif key in ROLE_KEYS and ROLE_KEYS[key] in self.ui.role_buttons:
            self.on_role(ROLE_KEYS[key])
