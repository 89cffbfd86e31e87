"""Subcommand modules for casework.

Provides register_commands(), which imports command modules lazily so
``casework --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from casework.commands.contact import contact
    from casework.commands.work import work

    cli.add_command(work)
    cli.add_command(contact)

    # --- Standalone commands ---
    from casework.commands.check import check

    cli.add_command(check)
