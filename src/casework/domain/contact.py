"""Contact form schema.

The form posts directly to a third-party form handler; this model only
checks the payload before it leaves the site. Keys match the form's field
names, so ``inquiry-type`` keeps its hyphen on the wire.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from casework.domain.errors import FieldIssue

INQUIRY_TYPES: tuple[str, ...] = ("new-project", "partnership", "support", "general")

InquiryType = Literal["new-project", "partnership", "support", "general"]

# One "@", no whitespace, a dot in the domain part.
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

_MESSAGES: dict[str, str] = {
    "name": "Name must be at least 2 characters",
    "email": "Invalid email address",
    "inquiry-type": "Please select an inquiry type",
    "message": "Message must be at least 10 characters",
}

_REQUIRED: dict[str, str] = {
    "name": "Name is required",
    "email": "Email is required",
    "inquiry-type": "Please select an inquiry type",
    "message": "Message is required",
}


class ContactForm(BaseModel):
    """A contact-form submission.

    Values are checked as typed; surrounding whitespace is not trimmed.
    An empty ``organization`` is treated as not given.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=2)
    email: str = Field(pattern=EMAIL_PATTERN)
    organization: str | None = None
    inquiry_type: InquiryType = Field(alias="inquiry-type")
    message: str = Field(min_length=10)

    @field_validator("organization")
    @classmethod
    def _blank_organization_is_none(cls, value: str | None) -> str | None:
        return value or None

    def to_submission(self) -> dict[str, Any]:
        """Payload in the shape the form handler receives."""
        return self.model_dump(by_alias=True, exclude_none=True)


def contact_issues(payload: dict[str, Any]) -> list[FieldIssue]:
    """Validate *payload* and return user-facing issues (empty when valid)."""
    try:
        ContactForm.model_validate(payload)
    except ValidationError as exc:
        issues: list[FieldIssue] = []
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "<root>"
            raw = payload.get(field)
            if err["type"] == "missing" or raw in (None, ""):
                message = _REQUIRED.get(field, err["msg"])
            else:
                message = _MESSAGES.get(field, err["msg"])
            issues.append(FieldIssue(location=field, message=message))
        return issues
    return []
