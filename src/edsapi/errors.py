"""Exception hierarchy for edsapi."""

from __future__ import annotations


class EdsError(Exception):
    """Base exception for all edsapi errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(EdsError):
    """Configuration validation or label table loading failed."""


class MalformedResponseError(EdsError):
    """The response document cannot be adapted at all."""


class MissingFieldError(EdsError, LookupError):
    """A field the provider always sends was absent from the document.

    Raised only by strict accessors. ``path`` is the full key path that was
    requested, not just the segment that failed.
    """

    def __init__(
        self,
        path: tuple[str, ...],
        *,
        missing: str | None = None,
        hint: str | None = None,
    ) -> None:
        dotted = ".".join(path)
        message = f"Missing field {dotted}"
        if missing is not None and missing != path[-1]:
            message += f" (no {missing!r})"
        super().__init__(message, hint=hint)
        self.path = path
        self.missing = missing
