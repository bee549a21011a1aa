"""Unique slug generation with bounded retries.

Each attempt assembles a fresh candidate (new random draws) and checks it
against the caller's used slugs, then against the optional async
``is_unique`` predicate. Collisions are retried through tenacity until
``max_attempts`` candidates have been tried, with no pause between attempts,
so the predicate await is the only point where the loop yields. Sampling and
part errors are configuration problems and propagate on the first attempt.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
)

from space_slug.assembler import assemble, default_parts
from space_slug.core.config import SlugOptions, UniqueSlugOptions, resolve_options
from space_slug.core.errors import RetryExhaustedError
from space_slug.parts import PartInput, as_part

logger = structlog.get_logger()


class SlugCollisionError(Exception):
    """A candidate was rejected; triggers the next attempt."""

    def __init__(self, slug: str, reason: str) -> None:
        self.slug = slug
        self.reason = reason
        super().__init__(f"Slug '{slug}' rejected: {reason}")


async def _no_sleep(_seconds: float) -> None:
    """Continue to the next attempt without yielding to the event loop."""


def _log_collision(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.debug(
        "slug_collision",
        attempt=retry_state.attempt_number,
        slug=getattr(exc, "slug", None),
        reason=getattr(exc, "reason", None),
    )


async def generate_unique_slug(
    parts: Sequence[PartInput] | None = None,
    options: SlugOptions | None = None,
    **overrides: Any,
) -> str:
    """Generate a slug that passes the uniqueness constraints.

    Args:
        parts: Slug parts; defaults to adjective, noun and two digits.
        options: Base options; a plain ``SlugOptions`` is accepted.
        **overrides: Option fields, including ``used_slugs``, ``is_unique``
            and ``max_attempts``.

    Returns:
        The first candidate not in ``used_slugs`` and accepted by
        ``is_unique``.

    Raises:
        RetryExhaustedError: If every one of ``max_attempts`` candidates was
            rejected.
        NotFoundError: If a category has no words (not retried).
        InsufficientWordsError: If a part asks for too many words (not retried).
        InvalidPartError: If a part is malformed (not retried).
    """
    resolved = resolve_options(options, UniqueSlugOptions, **overrides)
    slug_parts = [as_part(p) for p in parts] if parts else default_parts()
    used = frozenset(resolved.used_slugs)

    async def attempt() -> str:
        candidate = assemble(slug_parts, resolved)
        if candidate in used:
            raise SlugCollisionError(candidate, "already used")
        if resolved.is_unique is not None and not await resolved.is_unique(candidate):
            raise SlugCollisionError(candidate, "rejected by is_unique")
        return candidate

    retrying = AsyncRetrying(
        stop=stop_after_attempt(resolved.max_attempts),
        retry=retry_if_exception_type(SlugCollisionError),
        before_sleep=_log_collision,
        sleep=_no_sleep,
    )
    try:
        return await retrying(attempt)
    except RetryError as e:
        logger.warning("slug_retries_exhausted", attempts=resolved.max_attempts)
        raise RetryExhaustedError(resolved.max_attempts) from e


async def generate_unique_slugs(
    count: int,
    parts: Sequence[PartInput] | None = None,
    options: SlugOptions | None = None,
    **overrides: Any,
) -> list[str]:
    """Generate ``count`` slugs, unique among themselves and the used slugs.

    Slugs are produced one after another; each result is added to the used
    list seen by the next call.

    Raises:
        RetryExhaustedError: If any slug cannot be made unique.
    """
    resolved = resolve_options(options, UniqueSlugOptions, **overrides)
    used = list(resolved.used_slugs)
    slugs: list[str] = []
    for _ in range(count):
        slug = await generate_unique_slug(parts, resolved, used_slugs=used)
        used.append(slug)
        slugs.append(slug)
    return slugs
