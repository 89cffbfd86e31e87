"""Tests for WorkService."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from casework.infrastructure.store import CaseStudyStore
from casework.services.work import WorkService

WriteStudy = Callable[..., Path]


class TestListCaseStudies:
    def test_empty_directory(self, store: CaseStudyStore) -> None:
        result = WorkService(store).list_case_studies()
        assert result.ok
        assert result.data == {"count": 0, "items": []}

    def test_items_are_listing_cards(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("older", dates={"start": "2021-01"}, client="NIH")
        write_study("newer", dates={"start": "2024-01"}, client="CDC")
        result = WorkService(store).list_case_studies()
        assert result.ok
        assert result.data["count"] == 2
        assert [item["slug"] for item in result.data["items"]] == ["newer", "older"]
        assert result.data["items"][0]["client"] == "CDC"
        assert "filters" not in result.data

    def test_filters_echoed(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("a", sector=["Energy"])
        write_study("b", sector=["Government"])
        result = WorkService(store).list_case_studies(sector="Energy")
        assert [item["slug"] for item in result.data["items"]] == ["a"]
        assert result.data["filters"] == {"sector": "Energy"}

    def test_invalid_document(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("bad", services=[])
        result = WorkService(store).list_case_studies()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DOCUMENT"
        assert result.error.detail["filename"] == "bad.mdx"
        assert result.error.detail["issues"]

    def test_duplicate_slug(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("one", slug="same")
        write_study("two", slug="same")
        result = WorkService(store).list_case_studies()
        assert result.error is not None
        assert result.error.code == "DUPLICATE_SLUG"
        assert result.error.detail["slug"] == "same"

    def test_undecodable_document(self, store: CaseStudyStore, content_dir: Path) -> None:
        (content_dir / "bad.mdx").write_bytes(b"---\ntitle: \xff\xfe\n---\nBody")
        result = WorkService(store).list_case_studies()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOCUMENT_UNREADABLE"
        assert result.error.detail["filename"] == "bad.mdx"


class TestGetCaseStudy:
    def test_found(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("alpha", body="## Challenge\n\nText", title="Alpha | Migration")
        result = WorkService(store).get_case_study("alpha")
        assert result.ok
        assert result.data["slug"] == "alpha"
        assert result.data["title_lines"] == ["Alpha", "Migration"]
        assert result.data["content"] == "## Challenge\n\nText"
        assert result.warnings == []

    def test_without_body(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("alpha")
        result = WorkService(store).get_case_study("alpha", include_body=False)
        assert "content" not in result.data

    def test_not_found(self, store: CaseStudyStore) -> None:
        result = WorkService(store).get_case_study("missing-slug")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_slug_mismatch_warns(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("file-name", slug="other")
        result = WorkService(store).get_case_study("file-name")
        assert result.ok
        assert len(result.warnings) == 1
        assert "other" in result.warnings[0]

    def test_vanished_file(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        path = write_study("alpha")
        original = store.discover

        def discover_then_delete() -> list[str]:
            names = original()
            path.unlink()
            return names

        store.discover = discover_then_delete  # type: ignore[method-assign]
        result = WorkService(store).get_case_study("alpha")
        assert result.error is not None
        assert result.error.code == "DOCUMENT_MISSING"


class TestFacets:
    def test_sectors(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("a", sector=["Government", "Healthcare"])
        write_study("b", sector=["Government", "Energy"])
        result = WorkService(store).list_sectors()
        assert result.op == "list_sectors"
        assert result.data == {"count": 3, "values": ["Energy", "Government", "Healthcare"]}

    def test_platforms(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("a", platforms=["Socrata"])
        assert WorkService(store).list_platforms().data["values"] == ["Socrata"]

    def test_services(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("a", services=["Engineering", "Automation"])
        assert WorkService(store).list_services().data["values"] == ["Automation", "Engineering"]

    def test_slugs(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("a")
        assert WorkService(store).list_slugs().data["values"] == ["a"]

    def test_facet_failure(self, store: CaseStudyStore, write_study: WriteStudy) -> None:
        write_study("bad", sector=[])
        result = WorkService(store).list_sectors()
        assert not result.ok
        assert result.op == "list_sectors"
