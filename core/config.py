"""
Purpose: Configs for the window, layout, fonts and image lookup.
Dependencies: None.
Ext Hooks: Add more roles or themes.
"""

# Window
WINDOW_TITLE = "Overwatch Hero Generator"
SCREEN_WIDTH = 500
SCREEN_HEIGHT = 500
FPS = 30
BG_COLOR = (238, 238, 238)
TEXT_COLOR = (20, 20, 20)

# Fonts (falls back to pygame's default font when Verdana is missing)
FONT_NAME = 'Verdana'
TITLE_FONT_SIZE = 20
RESULT_FONT_SIZE = 18
BUTTON_FONT_SIZE = 14
IMAGE_TEXT_FONT_SIZE = 14

# Title label: full width, a bit below the top edge
TITLE_RECT = (0, 15, SCREEN_WIDTH, 30)

# Image display area
IMAGE_AREA_RECT = (50, 60, SCREEN_WIDTH - 100, 280)
IMAGE_AREA_BG = (245, 245, 245)
IMAGE_AREA_BORDER = (220, 220, 220)
FALLBACK_IMAGE_SIZE = (400, 280)  # Used when the area has no size yet

# Result label sits 10px under the image area
RESULT_RECT = (50, 60 + 280 + 10, SCREEN_WIDTH - 100, 28)

# Buttons
BUTTON_MARGIN = (14, 6)  # Inner text margin (x, y) for the natural size
BUTTON_PADDING = 16      # Extra width on top of the widest natural size
BUTTON_SPACING = 20
BUTTON_BOTTOM_MARGIN = 40
BUTTON_COLOR = (225, 225, 225)
BUTTON_HOVER_COLOR = (200, 215, 235)
BUTTON_BORDER_COLOR = (122, 138, 153)

# Images
IMAGE_DIR = "images"
IMAGE_EXT = ".png"

# Messages
PROMPT_TEXT = "Pick a role to generate a hero!"
NO_HEROES_TEXT = "(no heroes configured)"
NO_IMAGE_TEXT = "No image found for {hero}"
BAD_IMAGE_TEXT = "Could not load image for {hero}"
