"""space-slug.

Human-readable slugs such as ``witty-otter-42``, composed from dictionary
words, literal text and digits, with async uniqueness retries.
"""

from space_slug.assembler import space_slug
from space_slug.core import (
    DEFAULT_OPTIONS,
    ConfigFileError,
    InsufficientWordsError,
    InvalidPartError,
    NotFoundError,
    RetryExhaustedError,
    SlugOptions,
    SpaceSlugError,
    UniqueSlugOptions,
    clean_string,
    resolve_options,
)
from space_slug.data import DEFAULT_DICTIONARY
from space_slug.parts import (
    FunctionPart,
    LiteralPart,
    SequencePart,
    SetPart,
    SlugPart,
    as_part,
)
from space_slug.sampling import (
    DigitSpec,
    WordSpec,
    adjective,
    animal,
    color,
    cosmos,
    digits,
    emoji,
    noun,
    sample_digits,
    sample_words,
    season,
    verb,
    word,
)
from space_slug.unique import generate_unique_slug, generate_unique_slugs

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_DICTIONARY",
    "DEFAULT_OPTIONS",
    "ConfigFileError",
    "DigitSpec",
    "FunctionPart",
    "InsufficientWordsError",
    "InvalidPartError",
    "LiteralPart",
    "NotFoundError",
    "RetryExhaustedError",
    "SequencePart",
    "SetPart",
    "SlugOptions",
    "SlugPart",
    "SpaceSlugError",
    "UniqueSlugOptions",
    "WordSpec",
    "__version__",
    "adjective",
    "animal",
    "as_part",
    "clean_string",
    "color",
    "cosmos",
    "digits",
    "emoji",
    "generate_unique_slug",
    "generate_unique_slugs",
    "noun",
    "resolve_options",
    "sample_digits",
    "sample_words",
    "season",
    "space_slug",
    "verb",
    "word",
]
