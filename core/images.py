"""
Purpose: Hero image path lookup and scale-to-fit math.
Dependencies: core/config.py, math.
Ext Hooks: Other extensions (.jpg) via the ext argument.
Pure functions; no pygame so they can run without a display.
"""

import math
from typing import Tuple
from core.config import IMAGE_DIR, IMAGE_EXT, FALLBACK_IMAGE_SIZE


def hero_image_path(hero: str, image_dir: str = IMAGE_DIR, ext: str = IMAGE_EXT) -> str:
    """Build the image path for a hero, e.g. "D.Va" -> "images/D.Va.png". The name is used verbatim."""
    return f"{image_dir}/{hero}{ext}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def fit_within(original_size: Tuple[int, int], available_size: Tuple[int, int]) -> Tuple[int, int]:
    """
    Scale an image size to fit the available area while keeping its aspect ratio.

    Uses scale = min(aw / ow, ah / oh). Each axis is rounded and kept at least 1px.
    An available size with a non-positive axis (area not laid out yet) falls back
    to FALLBACK_IMAGE_SIZE.

    Args:
        original_size: (width, height) of the source image.
        available_size: (width, height) of the display area.

    Returns:
        (width, height) to scale the image to.
    """
    ow, oh = original_size
    max_w, max_h = available_size
    if max_w <= 0 or max_h <= 0:
        max_w, max_h = FALLBACK_IMAGE_SIZE
    if ow <= 0 or oh <= 0:
        raise ValueError(f"Invalid image size: {original_size}")

    scale = min(max_w / ow, max_h / oh)
    new_w = max(1, _round_half_up(ow * scale))
    new_h = max(1, _round_half_up(oh * scale))
    return new_w, new_h


def center_in(size: Tuple[int, int], area: Tuple[int, int, int, int]) -> Tuple[int, int]:
    """Top-left position that centers a (w, h) box inside an (x, y, w, h) area."""
    w, h = size
    ax, ay, aw, ah = area
    return ax + (aw - w) // 2, ay + (ah - h) // 2
