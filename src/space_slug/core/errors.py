"""Custom exceptions for slug generation and configuration errors."""

from __future__ import annotations


class SpaceSlugError(Exception):
    """Base exception for slug errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Space Slug Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class NotFoundError(SpaceSlugError):
    """Error when a category has no words for the active locale."""

    def __init__(self, category: str, locale: str | None = None) -> None:
        self.category = category
        self.locale = locale
        where = f" (locale '{locale}')" if locale else ""
        super().__init__(
            f"No words found for {category}{where}",
            "Check the category name or pass explicit words.",
        )


class InsufficientWordsError(SpaceSlugError):
    """Error when more unique words are requested than the source holds."""

    def __init__(self, count: int, available: int) -> None:
        self.count = count
        self.available = available
        super().__init__(
            f"Cannot generate {count} unique words from {available} words",
            "Lower the count or add more words to the category.",
        )


class InvalidPartError(SpaceSlugError):
    """Error when a slug part resolves to an unsupported value."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid slug part output: {type(value).__name__}",
            "Parts must be callables, strings, or lists/sets of strings.",
        )


class RetryExhaustedError(SpaceSlugError):
    """Error when no unique slug was found within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Could not generate unique slug after {attempts} attempts",
            "Raise max_attempts or add more parts to widen the slug space.",
        )


class ConfigFileError(SpaceSlugError):
    """Error when a configuration file is missing or invalid."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid configuration file {path}", reason)
