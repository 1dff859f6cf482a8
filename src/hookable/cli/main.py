"""hookable CLI entry point."""

import click


@click.group()
def cli():
    """hookable: lifecycle hook tooling."""
    pass


# Register subcommand groups
from hookable.cli.hooks_cmd import hooks  # noqa: E402

cli.add_command(hooks)
