"""Case study documents — front-matter parsing and validation.

A document is a text file that starts with a YAML block between two ``---``
lines, followed by free-form body markup. The body is opaque here: it is
returned exactly as it follows the metadata block and never rendered.

Pure parsing utilities live here so that the dependency direction stays
clean: infrastructure -> domain, never the reverse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from casework.domain.errors import DocumentValidationError, FieldIssue
from casework.domain.frontmatter import CaseStudyFrontmatter

DOCUMENT_EXTENSION = ".mdx"

_FRONTMATTER_DELIMITER = "---"


def _new_yaml() -> YAML:
    """Create a fresh safe-mode YAML parser.

    Safe mode yields plain ``dict``/``list``/``str`` values, which is what
    the schema validates against.
    """
    return YAML(typ="safe", pure=True)


# ---------------------------------------------------------------------------
# Front-matter splitting
# ---------------------------------------------------------------------------


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split raw document text into ``(yaml_block, body)``.

    The first line must be ``---``; the next ``---`` line closes the block.
    Only the closing delimiter's own line break is consumed; blank lines
    after it stay in the body. Handles ``\\n`` and ``\\r\\n`` line endings
    and a leading byte-order mark.

    Returns ``(None, content)`` when no complete delimiter pair exists.
    """
    normalized = content.removeprefix("\ufeff").replace("\r\n", "\n")
    lines = normalized.split("\n")
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        return None, content

    end_idx: int | None = None
    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        return None, content

    yaml_block = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])
    return yaml_block, body


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Parse YAML front-matter and body from document text.

    Returns:
        A ``(frontmatter_dict, body_text)`` tuple. If no front-matter block
        is present, returns ``({}, content)``.

    Raises:
        YAMLError: The metadata block is not valid YAML.
        TypeError: The metadata block is valid YAML but not a mapping.
    """
    yaml_block, body = split_frontmatter(content)
    if yaml_block is None:
        return {}, body

    data = _new_yaml().load(yaml_block)
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        msg = f"front-matter must be a mapping, got {type(data).__name__}"
        raise TypeError(msg)
    return data, body


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _issues_from(exc: ValidationError) -> list[FieldIssue]:
    issues: list[FieldIssue] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        issues.append(FieldIssue(location=location, message=err["msg"]))
    return issues


def validate_frontmatter(filename: str, data: dict[str, Any]) -> CaseStudyFrontmatter:
    """Validate a raw metadata mapping against the case study schema.

    Raises:
        DocumentValidationError: Naming *filename* and every field violation.
    """
    try:
        return CaseStudyFrontmatter.model_validate(data)
    except ValidationError as exc:
        raise DocumentValidationError(filename, _issues_from(exc)) from exc


# ---------------------------------------------------------------------------
# Document record
# ---------------------------------------------------------------------------


def derive_slug(filename: str, extension: str = DOCUMENT_EXTENSION) -> str:
    """Return the lookup identifier for *filename* (the name minus its extension)."""
    if extension and filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


@dataclass(frozen=True)
class CaseStudyDocument:
    """A validated case study: metadata plus the untouched body markup."""

    frontmatter: CaseStudyFrontmatter
    content: str
    filename: str = ""
    extension: str = DOCUMENT_EXTENSION

    @property
    def slug(self) -> str:
        """Identifier derived from the filename; falls back to the declared slug."""
        if not self.filename:
            return self.frontmatter.slug
        return derive_slug(self.filename, self.extension)

    @classmethod
    def from_text(
        cls,
        filename: str,
        text: str,
        *,
        extension: str = DOCUMENT_EXTENSION,
    ) -> CaseStudyDocument:
        """Parse and validate raw document text.

        Raises:
            DocumentValidationError: Malformed YAML or a schema mismatch.
        """
        try:
            data, body = parse_frontmatter(text)
        except (YAMLError, TypeError) as exc:
            issue = FieldIssue(location="<frontmatter>", message=str(exc))
            raise DocumentValidationError(filename, [issue]) from exc
        frontmatter = validate_frontmatter(filename, data)
        return cls(frontmatter=frontmatter, content=body, filename=filename, extension=extension)

    def to_summary(self) -> dict[str, Any]:
        """Listing-card view: the fields the work index shows for each study."""
        fm = self.frontmatter
        return {
            "slug": self.slug,
            "title": fm.title,
            "client": fm.client,
            "supported_via": fm.supported_via,
            "sector": list(fm.sector),
            "platforms": list(fm.platforms),
            "services": fm.headline_services,
            "preview": fm.preview_outcome,
            "metrics": [m.model_dump() for m in fm.headline_metrics],
            "content_type": fm.content_type,
            "start": fm.dates.start,
        }

    def to_detail(self, *, include_body: bool = True) -> dict[str, Any]:
        """Detail-page view: full metadata (camelCase keys as authored) plus body."""
        data: dict[str, Any] = {
            "slug": self.slug,
            "filename": self.filename,
            "title_lines": self.frontmatter.title_lines,
            "frontmatter": self.frontmatter.model_dump(mode="json", by_alias=True),
        }
        if include_body:
            data["content"] = self.content
        return data
