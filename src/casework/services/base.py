"""BaseService — shared foundation for services backed by the case study store.

Every service receives a :class:`CaseStudyStore` at construction time and
converts the store's exceptions into ``ServiceResult`` errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from casework.domain.errors import (
    ContentError,
    DocumentNotFoundError,
    DocumentReadError,
    DocumentValidationError,
    DuplicateSlugError,
)
from casework.services.result import ServiceResult

if TYPE_CHECKING:
    from casework.infrastructure.store import CaseStudyStore

logger = logging.getLogger(__name__)


class BaseService:
    """Base for store-backed services.

    Usage::

        class WorkService(BaseService):
            def list_case_studies(self) -> ServiceResult:
                try:
                    docs = self._store.get_all()
                except ContentError as exc:
                    return self._content_failure("list_case_studies", exc)
                ...
    """

    def __init__(self, store: CaseStudyStore) -> None:
        self._store = store

    @staticmethod
    def _content_failure(op: str, exc: ContentError) -> ServiceResult:
        """Translate a store exception into an error result."""
        logger.debug("%s failed: %s", op, exc)
        if isinstance(exc, DocumentValidationError):
            return ServiceResult.failure(
                op,
                "INVALID_DOCUMENT",
                str(exc),
                filename=exc.filename,
                issues=[str(issue) for issue in exc.issues],
            )
        if isinstance(exc, DocumentNotFoundError):
            return ServiceResult.failure(op, "DOCUMENT_MISSING", str(exc), filename=exc.filename)
        if isinstance(exc, DocumentReadError):
            return ServiceResult.failure(
                op, "DOCUMENT_UNREADABLE", str(exc), filename=exc.filename, reason=exc.reason
            )
        if isinstance(exc, DuplicateSlugError):
            return ServiceResult.failure(
                op, "DUPLICATE_SLUG", str(exc), slug=exc.slug, filenames=exc.filenames
            )
        return ServiceResult.failure(op, "CONTENT_ERROR", str(exc))
