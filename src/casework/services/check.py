"""CheckService — lint every case study and report all problems at once.

Unlike the store's fail-fast reads, the check walks every document and
collects issues so authors can fix a whole batch in one pass.
"""

from __future__ import annotations

from typing import Any

from casework.domain.content import CaseStudyDocument
from casework.domain.errors import (
    DocumentNotFoundError,
    DocumentReadError,
    DocumentValidationError,
)
from casework.infrastructure.store import find_duplicate_slugs
from casework.services.base import BaseService
from casework.services.result import ServiceResult
from casework.services.telemetry import traced

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

CAT_SCHEMA = "schema"
CAT_IO = "io"
CAT_SLUG = "slug"


def _issue(
    severity: str,
    category: str,
    filename: str,
    message: str,
    **extra: Any,
) -> dict[str, Any]:
    return {
        "severity": severity,
        "category": category,
        "filename": filename,
        "message": message,
        **extra,
    }


class CheckService(BaseService):
    """Validates the content directory without failing fast."""

    @traced
    def check(self) -> ServiceResult:
        """Report schema, read, and slug issues for every document."""
        issues: list[dict[str, Any]] = []
        documents: list[CaseStudyDocument] = []

        filenames = sorted(self._store.discover())
        for filename in filenames:
            try:
                documents.append(self._store.parse_document(filename))
            except DocumentValidationError as exc:
                for field_issue in exc.issues:
                    issues.append(
                        _issue(
                            SEVERITY_ERROR,
                            CAT_SCHEMA,
                            filename,
                            field_issue.message,
                            field=field_issue.location,
                        )
                    )
            except (DocumentNotFoundError, DocumentReadError) as exc:
                issues.append(_issue(SEVERITY_ERROR, CAT_IO, filename, str(exc)))

        if self._store.unique_slugs:
            for slug, owners in find_duplicate_slugs(documents).items():
                for filename in owners:
                    issues.append(
                        _issue(
                            SEVERITY_ERROR,
                            CAT_SLUG,
                            filename,
                            f"Slug '{slug}' is also declared by "
                            + ", ".join(o for o in owners if o != filename),
                        )
                    )

        for doc in documents:
            if doc.frontmatter.slug != doc.slug:
                issues.append(
                    _issue(
                        SEVERITY_WARNING,
                        CAT_SLUG,
                        doc.filename,
                        f"Front-matter slug '{doc.frontmatter.slug}' does not match "
                        f"filename slug '{doc.slug}'",
                    )
                )

        errors = [i for i in issues if i["severity"] == SEVERITY_ERROR]
        data = {
            "directory": str(self._store.directory),
            "checked": len(filenames),
            "valid": len(documents),
            "count": len(issues),
            "issues": issues,
        }
        if errors:
            return ServiceResult.failure(
                "check",
                "CHECK_FAILED",
                f"{len(errors)} error(s) in {len(filenames)} case study file(s)",
                **data,
            )
        warnings = [f"{i['filename']}: {i['message']}" for i in issues]
        return ServiceResult(ok=True, op="check", data=data, warnings=warnings)
