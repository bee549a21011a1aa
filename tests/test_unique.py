"""Tests for unique slug generation."""

import pydantic
import pytest

from space_slug import SlugOptions, generate_unique_slug, generate_unique_slugs
from space_slug.core.errors import NotFoundError, RetryExhaustedError
from space_slug.sampling import word

DICTIONARY = {"en": {"starwars": ["jabba", "hutt"]}}
STARWARS = [word("starwars")(2)]


class _CountingPredicate:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.calls: list[str] = []

    async def __call__(self, slug: str) -> bool:
        self.calls.append(slug)
        return self.answer


class TestGenerateUniqueSlug:
    """Tests for generate_unique_slug."""

    async def test_respects_max_attempts(self):
        """Test every candidate being used exhausts the default budget."""
        with pytest.raises(RetryExhaustedError) as exc_info:
            await generate_unique_slug(
                STARWARS, used_slugs=["jabba-hutt", "hutt-jabba"], dictionary=DICTIONARY
            )
        assert exc_info.value.attempts == 5

    async def test_used_slugs_exhaust_after_exact_attempts(self):
        """Test one assembly per attempt and no predicate call for used candidates."""
        assemblies = []

        def always_used(_options):
            assemblies.append(1)
            return "jabba"

        predicate = _CountingPredicate(True)
        with pytest.raises(RetryExhaustedError):
            await generate_unique_slug(
                [always_used], used_slugs=["jabba"], is_unique=predicate, max_attempts=5
            )
        assert len(assemblies) == 5
        assert predicate.calls == []

    async def test_retries_do_not_sleep(self, monkeypatch):
        """Test the loop moves between attempts without asyncio.sleep."""

        async def forbidden_sleep(_seconds):
            msg = "asyncio.sleep called between attempts"
            raise AssertionError(msg)

        monkeypatch.setattr("asyncio.sleep", forbidden_sleep)
        predicate = _CountingPredicate(False)
        with pytest.raises(RetryExhaustedError):
            await generate_unique_slug(
                STARWARS, is_unique=predicate, dictionary=DICTIONARY, max_attempts=4
            )
        assert len(predicate.calls) == 4

    async def test_respects_used_slugs(self):
        """Test a used candidate is skipped for the remaining one."""
        slug = await generate_unique_slug(
            STARWARS, used_slugs=["jabba-hutt"], dictionary=DICTIONARY, max_attempts=60
        )
        assert slug == "hutt-jabba"

    async def test_used_slugs_skip_predicate(self):
        """Test the predicate is never consulted for a used candidate."""
        predicate = _CountingPredicate(True)
        await generate_unique_slug(
            STARWARS,
            used_slugs=["jabba-hutt"],
            is_unique=predicate,
            dictionary=DICTIONARY,
            max_attempts=60,
        )
        assert predicate.calls == ["hutt-jabba"]

    async def test_predicate_always_false(self):
        """Test a rejecting predicate is called once per attempt, then fails."""
        predicate = _CountingPredicate(False)
        with pytest.raises(RetryExhaustedError) as exc_info:
            await generate_unique_slug(
                STARWARS, is_unique=predicate, dictionary=DICTIONARY, max_attempts=3
            )
        assert exc_info.value.attempts == 3
        assert len(predicate.calls) == 3

    async def test_predicate_always_true(self):
        """Test an accepting predicate resolves on the first attempt."""
        predicate = _CountingPredicate(True)
        slug = await generate_unique_slug(STARWARS, is_unique=predicate, dictionary=DICTIONARY)
        assert slug in ("jabba-hutt", "hutt-jabba")
        assert predicate.calls == [slug]

    async def test_no_constraints_returns_first_candidate(self):
        slug = await generate_unique_slug()
        assert len(slug.split("-")) == 3

    async def test_configuration_errors_not_retried(self):
        """Test sampling errors propagate on the first attempt."""
        predicate = _CountingPredicate(True)
        with pytest.raises(NotFoundError):
            await generate_unique_slug(
                [word("jedi")(1)], is_unique=predicate, dictionary=DICTIONARY
            )
        assert predicate.calls == []

    async def test_predicate_errors_propagate(self):
        """Test an exception raised by the predicate is not retried."""
        calls = []

        async def broken(slug: str) -> bool:
            calls.append(slug)
            msg = "database unavailable"
            raise RuntimeError(msg)

        with pytest.raises(RuntimeError, match="database unavailable"):
            await generate_unique_slug(STARWARS, is_unique=broken, dictionary=DICTIONARY)
        assert len(calls) == 1

    async def test_invalid_max_attempts(self):
        with pytest.raises(pydantic.ValidationError):
            await generate_unique_slug(STARWARS, max_attempts=0)

    async def test_accepts_plain_slug_options(self):
        """Test base options seed the uniqueness options."""
        slug = await generate_unique_slug(None, SlugOptions(separator="_"))
        assert len(slug.split("_")) == 3


class TestGenerateUniqueSlugs:
    """Tests for generate_unique_slugs."""

    async def test_distinct_results(self):
        """Test generated slugs are unique among themselves."""
        slugs = await generate_unique_slugs(
            2, STARWARS, dictionary=DICTIONARY, max_attempts=60
        )
        assert sorted(slugs) == ["hutt-jabba", "jabba-hutt"]

    async def test_exhausts_when_space_too_small(self):
        """Test asking for more slugs than exist fails."""
        with pytest.raises(RetryExhaustedError):
            await generate_unique_slugs(3, STARWARS, dictionary=DICTIONARY, max_attempts=60)

    async def test_default_parts(self):
        slugs = await generate_unique_slugs(20)
        assert len(set(slugs)) == 20

    async def test_respects_used_slugs(self):
        slugs = await generate_unique_slugs(
            1, STARWARS, used_slugs=["hutt-jabba"], dictionary=DICTIONARY, max_attempts=60
        )
        assert slugs == ["jabba-hutt"]
