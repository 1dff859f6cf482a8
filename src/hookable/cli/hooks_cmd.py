"""Hook CLI commands: check binding files."""

from pathlib import Path

import click

from hookable.hooks.loader import apply_hook_bindings, load_hook_bindings
from hookable.hooks.registry import HookRegistry
from hookable.hooks.types import HookLoadError, Phase


def _describe(callback) -> str:
    module = getattr(callback, "__module__", None)
    name = getattr(callback, "__qualname__", None) or repr(callback)
    return f"{module}:{name}" if module else name


@click.group()
def hooks():
    """Hook binding commands."""
    pass


@hooks.command()
@click.argument("hook_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat duplicate registrations as errors.",
)
def check(hook_file: Path, strict: bool):
    """Load a YAML hook binding file and show the resulting pipeline."""
    try:
        bindings = load_hook_bindings(hook_file)
    except HookLoadError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    registry = HookRegistry()
    duplicates = apply_hook_bindings(bindings, registry)

    for binding in duplicates:
        colour = "red" if strict else "yellow"
        click.echo(
            click.style(
                f"Duplicate hook '{binding.reference}' for '{binding.action}' ({binding.phase})",
                fg=colour,
            )
        )

    actions = registry.list_actions()
    click.echo(f"Loaded {len(bindings) - len(duplicates)} hook(s) across {len(actions)} action(s):")
    for action in actions:
        click.echo(f"  {action}")
        for phase in Phase:
            callbacks = registry.get(action, phase)
            if not callbacks:
                continue
            click.echo(f"    {phase.value}:")
            for i, callback in enumerate(callbacks, 1):
                click.echo(f"      {i}. {_describe(callback)}")

    if duplicates and strict:
        click.echo(
            click.style(f"\n{len(duplicates)} duplicate hook(s) found", fg="red", bold=True)
        )
        raise SystemExit(1)

    click.echo(click.style("\nHook file is valid.", fg="green", bold=True))
