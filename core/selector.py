"""
Purpose: Uniform random hero pick from a role pool.
Dependencies: core/heroes.py, random.
Ext Hooks: "No repeats until all used" tracker per role.
"""

import random
from typing import Optional, Sequence
from core.heroes import HERO_POOLS


def pick_hero(pool: Sequence[str], rng=None) -> Optional[str]:
    """
    Pick one hero from the pool, each with probability 1/len(pool).

    Args:
        pool: Ordered hero names for a single role.
        rng: Optional random.Random for reproducible picks; defaults to the random module.

    Returns:
        The picked name, or None when the pool is empty (no heroes configured).
    """
    if not pool:
        return None
    rng = rng or random
    return pool[rng.randrange(len(pool))]


def pick_role_hero(role: str, pools=None, rng=None) -> Optional[str]:
    """Look up the pool for a role and pick from it. Unknown roles raise ValueError."""
    pools = HERO_POOLS if pools is None else pools
    if role not in pools:
        raise ValueError(f"Invalid role: {role}")
    return pick_hero(pools[role], rng)

# Usage: hero = pick_role_hero("Tank")
