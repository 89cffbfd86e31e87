"""WorkService — the listing, detail, and facet data for the work pages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from casework.domain.errors import ContentError
from casework.services.base import BaseService
from casework.services.result import ServiceResult
from casework.services.telemetry import trace_span, traced


class WorkService(BaseService):
    """Read-only queries over the case study store."""

    @traced
    def list_case_studies(
        self,
        *,
        sector: str | None = None,
        platform: str | None = None,
        service: str | None = None,
        content_type: str | None = None,
    ) -> ServiceResult:
        """Listing cards, newest first, optionally narrowed by facet."""
        op = "list_case_studies"
        try:
            with trace_span("store.filter") as span:
                docs = self._store.filter(
                    sector=sector,
                    platform=platform,
                    service=service,
                    content_type=content_type,
                )
                if span is not None:
                    span.annotate("count", len(docs))
        except ContentError as exc:
            return self._content_failure(op, exc)

        filters = {
            key: value
            for key, value in (
                ("sector", sector),
                ("platform", platform),
                ("service", service),
                ("content_type", content_type),
            )
            if value is not None
        }
        data: dict[str, Any] = {
            "count": len(docs),
            "items": [doc.to_summary() for doc in docs],
        }
        if filters:
            data["filters"] = filters
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def get_case_study(self, slug: str, *, include_body: bool = True) -> ServiceResult:
        """Full metadata and body for one study."""
        op = "get_case_study"
        try:
            doc = self._store.get_by_slug(slug)
        except ContentError as exc:
            return self._content_failure(op, exc)
        if doc is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"No case study found with slug '{slug}'", slug=slug
            )

        warnings: list[str] = []
        if doc.frontmatter.slug != doc.slug:
            warnings.append(
                f"Front-matter slug '{doc.frontmatter.slug}' differs from filename slug "
                f"'{doc.slug}'"
            )
        return ServiceResult(
            ok=True, op=op, data=doc.to_detail(include_body=include_body), warnings=warnings
        )

    @traced
    def list_sectors(self) -> ServiceResult:
        return self._facet("list_sectors", self._store.get_all_sectors)

    @traced
    def list_platforms(self) -> ServiceResult:
        return self._facet("list_platforms", self._store.get_all_platforms)

    @traced
    def list_services(self) -> ServiceResult:
        return self._facet("list_services", self._store.get_all_services)

    @traced
    def list_slugs(self) -> ServiceResult:
        """Slugs to pre-generate detail routes for."""
        return self._facet("list_slugs", self._store.get_all_slugs)

    def _facet(self, op: str, load: Callable[[], list[str]]) -> ServiceResult:
        try:
            values = load()
        except ContentError as exc:
            return self._content_failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"count": len(values), "values": values})
