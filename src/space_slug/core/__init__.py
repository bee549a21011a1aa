"""Core configuration and utilities for space-slug."""

from space_slug.core.config import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_OPTIONS,
    DEFAULT_SEPARATOR,
    CliConfig,
    SlugOptions,
    UniqueSlugOptions,
    load_config,
    resolve_options,
)
from space_slug.core.errors import (
    ConfigFileError,
    InsufficientWordsError,
    InvalidPartError,
    NotFoundError,
    RetryExhaustedError,
    SpaceSlugError,
)
from space_slug.core.slug import clean_string

__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_OPTIONS",
    "DEFAULT_SEPARATOR",
    "CliConfig",
    "SlugOptions",
    "UniqueSlugOptions",
    "clean_string",
    "load_config",
    "resolve_options",
    "ConfigFileError",
    "InsufficientWordsError",
    "InvalidPartError",
    "NotFoundError",
    "RetryExhaustedError",
    "SpaceSlugError",
]
