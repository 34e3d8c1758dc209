"""
Purpose: Transient state of the current pick - last role, last hero, the name label text.
Dependencies: core/config.py for the fixed messages.
Nothing is kept between picks; every click overwrites it.
"""

from dataclasses import dataclass
from typing import Optional
from core.config import PROMPT_TEXT, NO_HEROES_TEXT


@dataclass
class HeroState:
    """
    Encapsulates what the window shows about the most recent pick.

    result_text always matches the most recent draw: the hero name after a
    successful pick, the no-heroes placeholder after an empty pool, or the
    start-up prompt before any click.
    """

    result_text: str = PROMPT_TEXT
    last_role: Optional[str] = None
    last_hero: Optional[str] = None

    def record_pick(self, role: str, hero: Optional[str]):
        """Store the outcome of a pick; hero=None means the role's pool was empty."""
        self.last_role = role
        self.last_hero = hero
        self.result_text = hero if hero is not None else NO_HEROES_TEXT

    @property
    def has_hero(self) -> bool:
        return self.last_hero is not None
