"""Content error taxonomy.

Every failure the store can raise derives from :class:`ContentError` so that
callers can catch the whole family at once. An unknown slug is *not* an
error: lookups return ``None`` for that case.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldIssue:
    """A single schema violation inside one document."""

    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class ContentError(Exception):
    """Base class for case study content failures."""


class DocumentValidationError(ContentError):
    """A document's front-matter does not match the case study schema."""

    def __init__(self, filename: str, issues: Sequence[FieldIssue]) -> None:
        self.filename = filename
        self.issues = list(issues)
        details = "; ".join(str(issue) for issue in self.issues) or "invalid front-matter"
        super().__init__(f"Invalid case study {filename!r}: {details}")


class DocumentNotFoundError(ContentError):
    """A discovered document disappeared before it could be read."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Case study file {filename!r} could not be read")


class DocumentReadError(ContentError):
    """A discovered document exists but its bytes could not be read as text."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Case study file {filename!r} is unreadable: {reason}")


class DuplicateSlugError(ContentError):
    """Two or more documents declare the same front-matter slug."""

    def __init__(self, slug: str, filenames: Sequence[str]) -> None:
        self.slug = slug
        self.filenames = list(filenames)
        super().__init__(f"Slug {slug!r} is declared by {', '.join(self.filenames)}")
