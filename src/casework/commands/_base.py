"""Click base classes for casework commands.

Commands and groups take an optional ``examples`` string. When present they
gain an eager ``--examples`` flag that prints it and exits, and their help
text ends with a pointer to that flag.
"""

from __future__ import annotations

from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples to see sample invocations."


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", None) or "")
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    """Adds the ``examples`` keyword to a Click command class."""

    params: list[click.Parameter]
    epilog: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())
            if not self.epilog:
                self.epilog = _EXAMPLES_HINT


class CaseworkCommand(_ExamplesMixin, click.Command):
    """A command that accepts ``examples=``."""


class CaseworkGroup(_ExamplesMixin, click.Group):
    """A group whose subcommands and subgroups also accept ``examples=``."""

    command_class = CaseworkCommand
    group_class = type
