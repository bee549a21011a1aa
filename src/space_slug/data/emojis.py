"""Emoji names usable as slug words.

Stored as ASCII shortcode names so they survive fragment cleaning.
"""

emojis = [
    "alien",
    "balloon",
    "bee",
    "boom",
    "cactus",
    "cake",
    "cherry",
    "clover",
    "crown",
    "dizzy",
    "dragon",
    "fire",
    "ghost",
    "gem",
    "globe",
    "heart",
    "koala",
    "lightning",
    "mushroom",
    "octopus",
    "palm",
    "pizza",
    "rainbow",
    "robot",
    "rocket",
    "satellite",
    "snowflake",
    "sparkles",
    "star",
    "sunflower",
    "taco",
    "tada",
    "telescope",
    "trophy",
    "tulip",
    "unicorn",
    "volcano",
    "wave",
    "zap",
]
