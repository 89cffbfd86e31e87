"""CaseStudyStore — read accessors over a directory of case study documents.

The store is stateless: each operation re-discovers and re-parses the
directory, so there is nothing to invalidate when authors edit content.
Any document that fails to parse aborts the whole operation; callers never
see a partial listing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from casework.domain.content import DOCUMENT_EXTENSION, CaseStudyDocument, derive_slug
from casework.domain.errors import ContentError, DuplicateSlugError
from casework.infrastructure.filesystem import list_document_files, read_document_file

logger = logging.getLogger(__name__)


class CaseStudyStore:
    """Loads validated case studies from *directory*.

    Args:
        directory: Folder holding the documents. Need not exist.
        extension: Filename suffix of recognized documents.
        unique_slugs: When True, ``get_all`` rejects document sets where two
            files declare the same front-matter ``slug``.
    """

    def __init__(
        self,
        directory: Path,
        *,
        extension: str = DOCUMENT_EXTENSION,
        unique_slugs: bool = True,
    ) -> None:
        self.directory = Path(directory)
        self.extension = extension
        self.unique_slugs = unique_slugs

    # ------------------------------------------------------------------
    # Discovery and parsing
    # ------------------------------------------------------------------

    def discover(self) -> list[str]:
        """List document filenames (filesystem order)."""
        files = list_document_files(self.directory, self.extension)
        logger.debug("Discovered %d case study files in %s", len(files), self.directory)
        return files

    def parse_document(self, filename: str) -> CaseStudyDocument:
        """Read and validate a single document.

        Raises:
            DocumentNotFoundError: The file is gone.
            DocumentReadError: The file is not UTF-8 text or cannot be opened.
            DocumentValidationError: The front-matter is malformed or off-schema.
        """
        try:
            text = read_document_file(self.directory, filename)
            return CaseStudyDocument.from_text(filename, text, extension=self.extension)
        except ContentError:
            logger.debug("Failed to parse case study %s", filename, exc_info=True)
            raise

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def get_all(self) -> list[CaseStudyDocument]:
        """All documents, newest ``dates.start`` first.

        Missing start dates sort last. Ties keep parse order.

        Raises:
            ContentError: Any document failed to load, or slugs collide.
        """
        documents = [self.parse_document(name) for name in self.discover()]
        if self.unique_slugs:
            _check_unique_slugs(documents)
        return sorted(documents, key=lambda doc: doc.frontmatter.start_key, reverse=True)

    def get_by_slug(self, slug: str) -> CaseStudyDocument | None:
        """The document whose filename stem is *slug*, or None."""
        for filename in self.discover():
            if derive_slug(filename, self.extension) == slug:
                return self.parse_document(filename)
        return None

    def get_all_slugs(self) -> list[str]:
        """Slugs of every document, in ``get_all`` order."""
        return [doc.slug for doc in self.get_all()]

    def get_all_sectors(self) -> list[str]:
        return self._distinct(lambda doc: doc.frontmatter.sector)

    def get_all_platforms(self) -> list[str]:
        return self._distinct(lambda doc: doc.frontmatter.platforms)

    def get_all_services(self) -> list[str]:
        return self._distinct(lambda doc: doc.frontmatter.services)

    def filter(
        self,
        *,
        sector: str | None = None,
        platform: str | None = None,
        service: str | None = None,
        content_type: str | None = None,
    ) -> list[CaseStudyDocument]:
        """``get_all`` narrowed to documents matching every given criterion."""
        results: list[CaseStudyDocument] = []
        for doc in self.get_all():
            fm = doc.frontmatter
            if sector is not None and sector not in fm.sector:
                continue
            if platform is not None and platform not in fm.platforms:
                continue
            if service is not None and service not in fm.services:
                continue
            if content_type is not None and fm.content_type != content_type:
                continue
            results.append(doc)
        return results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _distinct(self, values: Callable[[CaseStudyDocument], Iterable[str]]) -> list[str]:
        seen: set[str] = set()
        for doc in self.get_all():
            seen.update(values(doc))
        return sorted(seen)


def find_duplicate_slugs(documents: Iterable[CaseStudyDocument]) -> dict[str, list[str]]:
    """Map each front-matter slug declared more than once to its filenames."""
    owners: dict[str, list[str]] = {}
    for doc in documents:
        owners.setdefault(doc.frontmatter.slug, []).append(doc.filename)
    return {slug: names for slug, names in owners.items() if len(names) > 1}


def _check_unique_slugs(documents: list[CaseStudyDocument]) -> None:
    duplicates = find_duplicate_slugs(documents)
    if duplicates:
        slug, filenames = next(iter(duplicates.items()))
        raise DuplicateSlugError(slug, filenames)
