"""Standalone command: lint the case study directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from casework.commands._base import CaseworkCommand
from casework.services.check import CheckService

if TYPE_CHECKING:
    from casework.commands._context import AppContext


@click.command(
    cls=CaseworkCommand,
    examples="""\
  casework check
  casework --content-dir ./drafts check
  casework --json check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate every case study and report all problems."""
    app.emit(CheckService(app.store).check())
