"""Word and digit sampling for slug parts.

Samplers are described by small frozen specs (``WordSpec``, ``DigitSpec``)
built before the options are known, then evaluated against the options of a
single assembly. Specs are callables taking ``SlugOptions`` so they can be
used directly as function parts.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass

from space_slug.core.config import DEFAULT_OPTIONS, SlugOptions
from space_slug.core.errors import InsufficientWordsError, NotFoundError

DEFAULT_DIGIT_COUNT = 4


def sample_words(
    category: str,
    count: int = 1,
    options: SlugOptions = DEFAULT_OPTIONS,
    explicit_words: Sequence[str] | None = None,
) -> AbstractSet[str]:
    """Draw ``count`` distinct words from a category without replacement.

    Args:
        category: Category name in the active locale.
        count: Number of words to draw.
        options: Supplies locale, dictionary and random source.
        explicit_words: Used verbatim as the source when non-empty.

    Returns:
        Set view of exactly ``count`` words, iterating in draw order.

    Raises:
        NotFoundError: If the source has no words.
        InsufficientWordsError: If ``count`` exceeds the distinct words in the source.
        ValueError: If ``count`` is below 1.
    """
    if count < 1:
        msg = f"count must be at least 1, got {count}"
        raise ValueError(msg)

    source = explicit_words if explicit_words else options.words_for(category)
    # distinct words, in first-occurrence order
    words = list(dict.fromkeys(source))
    if not words:
        raise NotFoundError(category, options.locale)
    if count > len(words):
        raise InsufficientWordsError(count, len(words))

    sampled: dict[str, None] = {}
    while len(sampled) < count:
        sampled.setdefault(words[options.randrange(len(words))], None)
    return sampled.keys()


def sample_digits(
    count: int = DEFAULT_DIGIT_COUNT,
    no_consecutive_repeats: bool = False,
    options: SlugOptions = DEFAULT_OPTIONS,
) -> str:
    """Generate a numeric string of exactly ``count`` digits.

    Args:
        count: Number of digits.
        no_consecutive_repeats: Redraw any digit equal to the one before it.
        options: Supplies the random source.

    Returns:
        String of ``count`` characters in ``0``-``9``.
    """
    if count < 1:
        msg = f"count must be at least 1, got {count}"
        raise ValueError(msg)

    drawn: list[str] = []
    while len(drawn) < count:
        digit = str(options.randrange(10))
        if no_consecutive_repeats and drawn and drawn[-1] == digit:
            continue
        drawn.append(digit)
    return "".join(drawn)


@dataclass(frozen=True)
class WordSpec:
    """Deferred draw of words from one category.

    Attributes:
        category: Category name in the active locale.
        count: Number of distinct words to draw.
        explicit_words: Overrides the dictionary lookup when non-empty.
    """

    category: str
    count: int = 1
    explicit_words: tuple[str, ...] = ()

    def resolve(self, options: SlugOptions) -> AbstractSet[str]:
        """Sample words for this spec under the given options."""
        return sample_words(self.category, self.count, options, self.explicit_words)

    def __call__(self, options: SlugOptions) -> AbstractSet[str]:
        return self.resolve(options)


@dataclass(frozen=True)
class DigitSpec:
    """Deferred draw of a numeric string."""

    count: int = DEFAULT_DIGIT_COUNT
    no_consecutive_repeats: bool = False

    def resolve(self, options: SlugOptions) -> str:
        """Sample digits for this spec under the given options."""
        return sample_digits(self.count, self.no_consecutive_repeats, options)

    def __call__(self, options: SlugOptions) -> str:
        return self.resolve(options)


WordBuilder = Callable[..., WordSpec]


def word(category: str) -> WordBuilder:
    """Bind a category, returning a builder for ``WordSpec`` values.

    Examples:
        >>> planet = word("cosmos")
        >>> planet(2)
        WordSpec(category='cosmos', count=2, explicit_words=())
    """

    def build(count: int = 1, words: Sequence[str] | None = None) -> WordSpec:
        return WordSpec(category, count, tuple(words or ()))

    build.__name__ = category
    return build


def digits(count: int = DEFAULT_DIGIT_COUNT, no_consecutive_repeats: bool = False) -> DigitSpec:
    """Build a ``DigitSpec``."""
    return DigitSpec(count, no_consecutive_repeats)


noun = word("nouns")
adjective = word("adjectives")
color = word("colors")
season = word("seasons")
emoji = word("emojis")
verb = word("verbs")
animal = word("animals")
cosmos = word("cosmos")
