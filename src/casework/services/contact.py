"""ContactService — validate a contact-form submission before it is posted."""

from __future__ import annotations

from typing import Any

from casework.domain.contact import ContactForm, contact_issues
from casework.services.result import ServiceResult
from casework.services.telemetry import traced


class ContactService:
    """Checks submissions bound for the site's form handler.

    Posting the submission is left to the form handler itself; this service
    only decides whether it may be sent and in what shape.
    """

    def __init__(self, endpoint: str) -> None:
        self._endpoint = endpoint

    @traced
    def validate(self, payload: Any) -> ServiceResult:
        op = "validate_contact"
        if not isinstance(payload, dict):
            return ServiceResult.failure(
                op, "INVALID_CONTACT", "Submission must be a JSON object", fields={}
            )

        issues = contact_issues(payload)
        if issues:
            fields = {issue.location: issue.message for issue in issues}
            return ServiceResult.failure(
                op,
                "INVALID_CONTACT",
                f"{len(fields)} field(s) need attention",
                fields=fields,
            )

        form = ContactForm.model_validate(payload)
        return ServiceResult(
            ok=True,
            op=op,
            data={"endpoint": self._endpoint, "submission": form.to_submission()},
        )
