"""Command group: case study listing, detail, and facets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from casework.commands._base import CaseworkGroup
from casework.domain.frontmatter import CONTENT_TYPES
from casework.services.work import WorkService

if TYPE_CHECKING:
    from casework.commands._context import AppContext

_WORK_EXAMPLES = """\
  casework work list
  casework work list --sector Government --platform Socrata
  casework work show cdc-data-migration
  casework work sectors
  casework --json work slugs"""


@click.group(cls=CaseworkGroup, examples=_WORK_EXAMPLES)
def work() -> None:
    """Browse case studies the way the work pages present them."""


@work.command(
    name="list",
    examples="""\
  casework work list
  casework work list --sector Healthcare
  casework work list --platform CKAN --type detailed
  casework -q work list --service "Data Migration"
  casework work list --type summary""",
)
@click.option("--sector", default=None, help="Only studies tagged with this sector.")
@click.option("--platform", default=None, help="Only studies on this platform.")
@click.option("--service", default=None, help="Only studies offering this service.")
@click.option(
    "--type",
    "content_type",
    type=click.Choice(list(CONTENT_TYPES)),
    default=None,
    help="Only detailed or summary studies.",
)
@click.pass_obj
def list_cmd(
    app: AppContext,
    sector: str | None,
    platform: str | None,
    service: str | None,
    content_type: str | None,
) -> None:
    """List case studies, newest first."""
    result = WorkService(app.store).list_case_studies(
        sector=sector,
        platform=platform,
        service=service,
        content_type=content_type,
    )
    app.emit(result)


@work.command(
    examples="""\
  casework work show cdc-data-migration
  casework work show cdc-data-migration --no-body
  casework --json work show cdc-data-migration"""
)
@click.argument("slug")
@click.option("--body/--no-body", default=True, help="Include the document body.")
@click.pass_obj
def show(app: AppContext, slug: str, body: bool) -> None:
    """Show one case study by slug."""
    app.emit(WorkService(app.store).get_case_study(slug, include_body=body))


@work.command(examples="  casework work sectors")
@click.pass_obj
def sectors(app: AppContext) -> None:
    """List every sector, sorted."""
    app.emit(WorkService(app.store).list_sectors())


@work.command(examples="  casework work platforms")
@click.pass_obj
def platforms(app: AppContext) -> None:
    """List every platform, sorted."""
    app.emit(WorkService(app.store).list_platforms())


@work.command(examples="  casework work services")
@click.pass_obj
def services(app: AppContext) -> None:
    """List every service, sorted."""
    app.emit(WorkService(app.store).list_services())


@work.command(examples="  casework -q work slugs")
@click.pass_obj
def slugs(app: AppContext) -> None:
    """List the slugs detail pages are generated for."""
    app.emit(WorkService(app.store).list_slugs())
