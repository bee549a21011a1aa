"""Slug part variants and their resolution into cleaned fragments.

A slug is built from an ordered list of parts. Each part is one of four
variants:

1. ``FunctionPart`` - a callable evaluated against the assembly options
   (``WordSpec``/``DigitSpec`` or any user function).
2. ``LiteralPart`` - a fixed string.
3. ``SequencePart`` - fixed words, joined in order.
4. ``SetPart`` - fixed unique words, joined in the set's iteration order.

Raw values are coerced to a variant once by ``as_part``; ``resolve_part``
turns a variant into a cleaned fragment.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Any

from space_slug.core.config import SlugOptions
from space_slug.core.errors import InvalidPartError
from space_slug.sampling import DEFAULT_DIGIT_COUNT, DigitSpec, WordSpec, word

PartFn = Callable[[SlugOptions], Any]


@dataclass(frozen=True)
class FunctionPart:
    """Part produced by calling ``fn`` with the assembly options."""

    fn: PartFn


@dataclass(frozen=True)
class LiteralPart:
    """Fixed text, cleaned like any other fragment."""

    text: str


@dataclass(frozen=True)
class SequencePart:
    """Fixed words joined in the given order."""

    words: tuple[str, ...]


@dataclass(frozen=True)
class SetPart:
    """Fixed unique words, kept in the iteration order they were given in."""

    words: tuple[str, ...]


SlugPart = FunctionPart | LiteralPart | SequencePart | SetPart
PartInput = SlugPart | PartFn | str | Sequence[str] | AbstractSet[str]

_PART_TYPES = (FunctionPart, LiteralPart, SequencePart, SetPart)


def _strings(values: Iterable[Any], original: object) -> tuple[str, ...]:
    items = tuple(values)
    if not all(isinstance(item, str) for item in items):
        raise InvalidPartError(original)
    return items


def as_part(value: PartInput) -> SlugPart:
    """Coerce a raw part input into its variant.

    Raises:
        InvalidPartError: If the value matches no variant.
    """
    if isinstance(value, _PART_TYPES):
        return value
    if isinstance(value, str):
        return LiteralPart(value)
    if isinstance(value, AbstractSet):
        return SetPart(_strings(value, value))
    if isinstance(value, Sequence):
        return SequencePart(_strings(value, value))
    if callable(value):
        return FunctionPart(value)
    raise InvalidPartError(value)


def _join_words(words: Iterable[str], options: SlugOptions) -> str:
    return options.separator.join(options.clean(w) for w in words)


def _resolve_output(output: Any, options: SlugOptions) -> str:
    if isinstance(output, str):
        return options.clean(output)
    if isinstance(output, (AbstractSet, Sequence)):
        return _join_words(_strings(output, output), options)
    raise InvalidPartError(output)


def resolve_part(part: SlugPart, options: SlugOptions) -> str:
    """Resolve a part into its cleaned, untransformed fragment.

    Args:
        part: Part variant.
        options: Resolved options for the current assembly.

    Returns:
        Cleaned fragment; multi-word parts are joined with the separator.

    Raises:
        InvalidPartError: If a function part returns an unsupported value.
    """
    if isinstance(part, FunctionPart):
        return _resolve_output(part.fn(options), options)
    if isinstance(part, LiteralPart):
        return options.clean(part.text)
    if isinstance(part, (SequencePart, SetPart)):
        return _join_words(part.words, options)
    raise InvalidPartError(part)


def parse_part_spec(spec: str) -> SlugPart:
    """Parse a compact text part spec, as used on the command line.

    Formats:
        ``=text``           literal text
        ``digits[:n]``      ``n`` digits (default 4)
        ``digits!:n``       ``n`` digits without adjacent repeats
        ``category[:n]``    ``n`` words from a dictionary category (default 1)

    Raises:
        ValueError: If the spec is empty or the count is not a positive integer.
    """
    spec = spec.strip()
    if not spec:
        msg = "Part spec cannot be empty"
        raise ValueError(msg)
    if spec.startswith("="):
        return LiteralPart(spec[1:])

    name, _, raw_count = spec.partition(":")
    count: int | None = None
    if raw_count:
        try:
            count = int(raw_count)
        except ValueError:
            msg = f"Invalid count in part spec '{spec}'"
            raise ValueError(msg) from None
        if count < 1:
            msg = f"Count must be at least 1 in part spec '{spec}'"
            raise ValueError(msg)

    if name in ("digits", "digits!"):
        no_repeats = name.endswith("!")
        return FunctionPart(DigitSpec(count or DEFAULT_DIGIT_COUNT, no_repeats))
    word_spec: WordSpec = word(name)(count or 1)
    return FunctionPart(word_spec)
