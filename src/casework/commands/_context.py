"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the case study store from settings on first use
and centralizes result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from casework.config.logging import configure_logging
from casework.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from casework.config.settings import CaseworkSettings
    from casework.infrastructure.store import CaseStudyStore
    from casework.services.result import ServiceResult


class AppContext:
    """Context object flowing through Click's command hierarchy."""

    def __init__(self, settings: CaseworkSettings) -> None:
        self.settings = settings
        self._store: CaseStudyStore | None = None

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            content_dir=settings.content_directory,
        )

        if settings.verbose:
            from casework.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> CaseStudyStore:
        """The case study store (created lazily on first access)."""
        if self._store is None:
            from casework.infrastructure.store import CaseStudyStore

            content = self.settings.content
            self._store = CaseStudyStore(
                self.settings.content_directory,
                extension=content.extension,
                unique_slugs=content.unique_slugs,
            )
        return self._store

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr (unless in JSON
          mode, where they are part of the payload).
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
