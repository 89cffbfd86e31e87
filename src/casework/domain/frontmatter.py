"""Case study front-matter schema.

YAML keys are camelCase (``supportedVia``, ``techStack``, ``logoPermission``,
``contentType``); attributes are snake_case via a camel alias generator.
Models are frozen and scalar fields are strict: YAML scalars are never
coerced into another type, so ``logoPermission: "yes"`` or an unquoted
``start: 2024-01-15`` fail validation instead of being silently converted.
Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

Confidentiality = Literal["public", "limited", "anonymized"]
ContentType = Literal["detailed", "summary"]

CONFIDENTIALITY_LEVELS: tuple[str, ...] = ("public", "limited", "anonymized")
CONTENT_TYPES: tuple[str, ...] = ("detailed", "summary")

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)


class Metric(BaseModel):
    """A headline KPI shown on listing cards and the detail page."""

    model_config = _MODEL_CONFIG

    label: StrictStr = Field(min_length=1)
    value: StrictStr | StrictInt | StrictFloat


class DateRange(BaseModel):
    """Engagement dates. Free-form strings, compared lexicographically."""

    model_config = _MODEL_CONFIG

    start: StrictStr | None = None
    end: StrictStr | None = None


class CaseStudyFrontmatter(BaseModel):
    """Validated metadata block of a case study document."""

    model_config = _MODEL_CONFIG

    # Basic info
    title: StrictStr = Field(min_length=1)
    slug: StrictStr = Field(min_length=1)
    client: StrictStr | None = None
    supported_via: StrictStr | None = None

    # Classification
    sector: list[StrictStr] = Field(min_length=1)
    platforms: list[StrictStr] = Field(min_length=1)
    services: list[StrictStr] = Field(min_length=1)
    tech_stack: list[StrictStr] | None = None

    # Content
    metrics: list[Metric] | None = None
    outcomes: list[StrictStr] = Field(min_length=1)

    # Legal/permissions
    confidentiality: Confidentiality = "public"
    logo_permission: StrictBool = False

    dates: DateRange
    content_type: ContentType = "summary"

    @property
    def start_key(self) -> str:
        """Sort key for newest-first ordering; a missing start sorts last."""
        return self.dates.start or ""

    @property
    def title_lines(self) -> list[str]:
        """Title split on ``" | "`` separators, one entry per rendered line."""
        return self.title.split(" | ")

    @property
    def is_detailed(self) -> bool:
        return self.content_type == "detailed"

    @property
    def preview_outcome(self) -> str:
        return self.outcomes[0]

    @property
    def headline_metrics(self) -> list[Metric]:
        return list(self.metrics or [])[:2]

    @property
    def headline_services(self) -> list[str]:
        return self.services[:3]
