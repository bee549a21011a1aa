"""Bundled word dictionaries, keyed by locale then category."""

from space_slug.data.emojis import emojis
from space_slug.data.en import adjectives, animals, colors, cosmos, nouns, seasons, verbs

DEFAULT_DICTIONARY: dict[str, dict[str, list[str]]] = {
    "en": {
        "seasons": seasons,
        "emojis": emojis,
        "adjectives": adjectives,
        "nouns": nouns,
        "colors": colors,
        "animals": animals,
        "verbs": verbs,
        "cosmos": cosmos,
    },
}

__all__ = [
    "DEFAULT_DICTIONARY",
    "adjectives",
    "animals",
    "colors",
    "cosmos",
    "emojis",
    "nouns",
    "seasons",
    "verbs",
]
