"""Command group: contact form submissions."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from casework.commands._base import CaseworkGroup
from casework.services.contact import ContactService

if TYPE_CHECKING:
    from casework.commands._context import AppContext


@click.group(
    cls=CaseworkGroup,
    examples="""\
  casework contact validate submission.json
  echo '{"name": "Ada"}' | casework contact validate""",
)
def contact() -> None:
    """Contact form tools."""


@contact.command(
    examples="""\
  casework contact validate submission.json
  cat submission.json | casework --json contact validate -"""
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def validate(app: AppContext, source: IO[str]) -> None:
    """Check a JSON contact-form submission (file or stdin)."""
    try:
        payload = json.load(source)
    except json.JSONDecodeError as exc:
        msg = f"Submission is not valid JSON: {exc}"
        raise click.ClickException(msg) from exc
    app.emit(ContactService(app.settings.site.contact_endpoint).validate(payload))
