"""Configuration schemas and loading for space-slug."""

from __future__ import annotations

import random
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, SkipValidation, field_validator
from pydantic import ValidationError as PydanticValidationError

from space_slug.core.errors import ConfigFileError
from space_slug.core.slug import clean_string as _clean_string
from space_slug.data import DEFAULT_DICTIONARY

DEFAULT_LOCALE = "en"
DEFAULT_SEPARATOR = "-"
DEFAULT_MAX_ATTEMPTS = 5

Dictionary = dict[str, dict[str, list[str]]]
StringFn = Callable[[str], str]
UniquePredicate = Callable[[str], Awaitable[bool]]

OptionsT = TypeVar("OptionsT", bound="SlugOptions")


class SlugOptions(BaseModel):
    """Options shared by every part of one slug assembly.

    Attributes:
        locale: Key of the active category map in ``dictionary``.
        separator: Joins fragments and words; may be empty.
        dictionary: Locale -> category -> words. Referenced as-is, never copied.
        transform: Applied to each cleaned fragment. Defaults to lowercasing.
        clean_string: Replaces the default fragment cleaner when set.
        rng: Random source for sampling. Defaults to the ``random`` module.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    locale: str = DEFAULT_LOCALE
    separator: str = DEFAULT_SEPARATOR
    dictionary: Annotated[Dictionary, SkipValidation] = Field(
        default_factory=lambda: DEFAULT_DICTIONARY
    )
    transform: StringFn | None = None
    clean_string: StringFn | None = None
    rng: random.Random | None = None

    def clean(self, value: str) -> str:
        """Clean one raw word or phrase into a fragment."""
        if self.clean_string is not None:
            return self.clean_string(value)
        return _clean_string(value, self.separator)

    def apply_transform(self, fragment: str) -> str:
        """Apply the configured transform to a fragment."""
        if self.transform is None:
            return fragment.lower()
        return self.transform(fragment)

    def randrange(self, stop: int) -> int:
        """Draw a uniform integer in ``[0, stop)``."""
        if self.rng is not None:
            return self.rng.randrange(stop)
        return random.randrange(stop)  # noqa: S311

    def words_for(self, category: str) -> list[str]:
        """Look up the words of a category in the active locale."""
        categories = self.dictionary.get(self.locale) or {}
        return categories.get(category) or []


class UniqueSlugOptions(SlugOptions):
    """Slug options plus uniqueness constraints.

    Attributes:
        used_slugs: Slugs that must not be returned.
        is_unique: Async predicate deciding whether a candidate is acceptable.
        max_attempts: Number of candidates to try before giving up.
    """

    used_slugs: list[str] = Field(default_factory=list)
    is_unique: UniquePredicate | None = None
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)


DEFAULT_OPTIONS = SlugOptions()


def resolve_options(
    options: SlugOptions | None = None,
    model: type[OptionsT] = SlugOptions,  # type: ignore[assignment]
    **overrides: Any,
) -> OptionsT:
    """Build effective options field by field.

    Precedence, lowest first: model defaults, fields explicitly set on
    ``options``, keyword ``overrides``. Fields of ``options`` that ``model``
    does not declare are dropped, so plain ``SlugOptions`` can seed a
    ``UniqueSlugOptions``.

    Args:
        options: Caller options, or None for defaults.
        model: Options model to build.
        **overrides: Individual field values that win over ``options``.

    Returns:
        Validated options instance.

    Raises:
        pydantic.ValidationError: If a value is invalid or a field is unknown.
    """
    values: dict[str, Any] = {}
    if options is not None:
        for name in options.model_fields_set:
            if name in model.model_fields:
                values[name] = getattr(options, name)
    values.update(overrides)
    return model.model_validate(values)


class CliConfig(BaseModel):
    """Settings read from a YAML file by the command line tool."""

    locale: str = DEFAULT_LOCALE
    separator: str = DEFAULT_SEPARATOR
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)
    parts: list[str] = Field(default_factory=list)
    upper: bool = False

    @field_validator("parts")
    @classmethod
    def validate_parts_not_blank(cls, v: list[str]) -> list[str]:
        """Ensure part specs are non-empty strings."""
        for spec in v:
            if not spec or not spec.strip():
                msg = "Part specs cannot be empty"
                raise ValueError(msg)
        return v


def load_config(path: str | Path) -> CliConfig:
    """Load and validate command line settings from a YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated CliConfig instance.

    Raises:
        ConfigFileError: If the file is missing, malformed, or invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigFileError(str(config_path), "Configuration file not found.")

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigFileError(str(config_path), f"Invalid YAML: {e}") from e

    try:
        return CliConfig.model_validate(data or {})
    except PydanticValidationError as e:
        raise ConfigFileError(str(config_path), str(e)) from e
