"""Slug assembly from an ordered list of parts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from space_slug.core.config import SlugOptions, resolve_options
from space_slug.parts import PartInput, SlugPart, as_part, resolve_part
from space_slug.sampling import adjective, digits, noun


def default_parts() -> list[SlugPart]:
    """Parts used when none are given: adjective, noun, two digits."""
    return [as_part(adjective(1)), as_part(noun(1)), as_part(digits(2))]


def assemble(parts: Sequence[SlugPart], options: SlugOptions) -> str:
    """Join resolved, transformed fragments of ``parts`` with the separator.

    Args:
        parts: Part variants, in slug order.
        options: Fully resolved options shared by every part.

    Returns:
        The slug.
    """
    fragments = [options.apply_transform(resolve_part(part, options)) for part in parts]
    return options.separator.join(fragments)


def space_slug(
    parts: Sequence[PartInput] | None = None,
    options: SlugOptions | None = None,
    **overrides: Any,
) -> str:
    """Generate a slug from parts.

    Args:
        parts: Callables, strings, sequences or sets of strings. Defaults to
            adjective, noun and two digits when None or empty.
        options: Base options; unset fields fall back to library defaults.
        **overrides: Option fields that win over ``options``.

    Returns:
        Slug such as ``"witty-otter-42"``.

    Raises:
        NotFoundError: If a category has no words.
        InsufficientWordsError: If a part asks for more words than exist.
        InvalidPartError: If a part or its output has an unsupported shape.

    Examples:
        >>> space_slug([noun(2), animal(1), digits(3)])  # doctest: +SKIP
        'harbor-lantern-otter-804'
        >>> space_slug(["Hello World"], separator="_")
        'hello_world'
    """
    resolved = resolve_options(options, SlugOptions, **overrides)
    slug_parts = [as_part(p) for p in parts] if parts else default_parts()
    return assemble(slug_parts, resolved)
