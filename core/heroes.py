"""
Purpose: Static hero pools by role.
Dependencies: None.
Ext Hooks: New heroes go at the end of their role list; filenames in images/ must match exactly.
"""

TANKS = [
    "D.Va", "Doomfist", "Hazard", "Junker Queen", "Mauga", "Orisa",
    "Ramattra", "Reinhardt", "Roadhog", "Sigma", "Winston",
    "Wrecking Ball", "Zarya",
]

DAMAGES = [
    "Ashe", "Bastion", "Cassidy", "Echo", "Freja", "Genji", "Hanzo",
    "Junkrat", "Mei", "Pharah", "Reaper", "Sojourn", "Soldier 76",
    "Sombra", "Symmetra", "Torbjorn", "Tracer", "Venture", "Widowmaker",
]

SUPPORTS = [
    "Ana", "Baptiste", "Brigitte", "Illari", "Juno", "Kiriko", "Lifeweaver",
    "Lucio", "Mercy", "Moira", "Zenyatta",
]

# Button order left to right
ROLES = ("Tank", "Damage", "Support")

HERO_POOLS = {
    "Tank": TANKS,
    "Damage": DAMAGES,
    "Support": SUPPORTS,
}
