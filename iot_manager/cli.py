"""CLI entry point for the scenario manager.

Usage:
    iot-manager [--vault DIR] <command> [args]

Every command prints one flow-compatible JSON object on stdout and exits
with status 1 when it did not succeed. Prompts and logs go to stderr.
"""

import logging
import sys
from typing import Optional

import click

from .config import ManagerConfig, load_config
from .reporting.json_reporter import JsonReporter
from .runner.manager import Chooser, CommandResult, ScenarioManager

logger = logging.getLogger(__name__)


def prompt_chooser(title: str, choice: Optional[int] = None) -> Chooser:
    """Build a chooser that asks on the terminal.

    Args:
        title: Heading shown above the options.
        choice: 1-based option picked in advance. Skips the prompt.
    """

    def choose(options: list[str]) -> int:
        if choice is not None:
            return choice - 1
        click.echo(title, err=True)
        for n, option in enumerate(options, start=1):
            click.echo(f"  {n}. {option}", err=True)
        picked = click.prompt(
            "Choice",
            type=click.IntRange(1, len(options)),
            err=True,
        )
        return picked - 1

    return choose


def emit(ctx: click.Context, result: CommandResult) -> None:
    """Print a command result and set the exit status."""
    reporter: JsonReporter = ctx.obj["reporter"]
    click.echo(reporter.to_json_string(result.to_flow_json(), pretty=ctx.obj["pretty"]))
    if not result.success:
        ctx.exit(1)


def run(ctx: click.Context, command: str, action) -> None:
    """Run a manager action, reporting unexpected errors as JSON."""
    try:
        result = action(ctx.obj["manager"])
    except (OSError, ValueError, IndexError) as e:
        logger.debug("%s failed", command, exc_info=True)
        result = CommandResult(command=command, success=False, message=f"{command} failed: {e}")
    emit(ctx, result)


@click.group()
@click.option("--vault", "vault_root", type=click.Path(file_okay=False), default=None,
              help="Vault directory (default: $IOT_MANAGER_VAULT or .)")
@click.option("--versions-folder", default=None,
              help="Folder for snapshots inside the vault (default: versions)")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--pretty", is_flag=True, help="Pretty print output")
@click.pass_context
def main(
    ctx: click.Context,
    vault_root: Optional[str],
    versions_folder: Optional[str],
    verbose: bool,
    pretty: bool,
):
    """Manage smart-home scenario notes."""
    try:
        config = load_config()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    config = ManagerConfig(
        vault_root=vault_root or config.vault_root,
        versions_folder=versions_folder or config.versions_folder,
        log_level="DEBUG" if verbose else config.log_level,
    )
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["manager"] = ScenarioManager(config=config)
    ctx.obj["reporter"] = JsonReporter()
    ctx.obj["pretty"] = pretty


@main.command("import")
@click.argument("source", type=click.Path(dir_okay=False))
@click.pass_context
def import_cmd(ctx: click.Context, source: str):
    """Import a YAML scenario file as a note."""
    run(ctx, "import", lambda m: m.import_yaml(source))


@main.command("export")
@click.argument("note")
@click.option("--dest", type=click.Path(file_okay=False), default=".",
              help="Directory for the exported .yaml file")
@click.pass_context
def export_cmd(ctx: click.Context, note: str, dest: str):
    """Export a note's YAML block to a .yaml file."""
    run(ctx, "export", lambda m: m.export_yaml(note, dest))


@main.command("version")
@click.argument("note")
@click.pass_context
def version_cmd(ctx: click.Context, note: str):
    """Create a timestamped snapshot of a note."""
    run(ctx, "version", lambda m: m.create_version(note))


@main.command("versions")
@click.argument("note")
@click.pass_context
def versions_cmd(ctx: click.Context, note: str):
    """Write the list of snapshots of a note."""
    run(ctx, "versions", lambda m: m.show_versions(note))


@main.command("validate")
@click.argument("note")
@click.pass_context
def validate_cmd(ctx: click.Context, note: str):
    """Validate the scenario structure of a note."""
    run(ctx, "validate", lambda m: m.validate(note))


@main.command("template")
@click.option("--choice", type=int, default=None,
              help="Trigger type number, skips the prompt")
@click.pass_context
def template_cmd(ctx: click.Context, choice: Optional[int]):
    """Generate a scenario template note."""
    chooser = prompt_chooser("Select Trigger Type", choice)
    run(ctx, "template", lambda m: m.generate_template(chooser))


@main.command("compare")
@click.argument("note")
@click.option("--choice", type=int, default=None,
              help="Version number, skips the prompt")
@click.pass_context
def compare_cmd(ctx: click.Context, note: str, choice: Optional[int]):
    """Compare a note with one of its snapshots."""
    chooser = prompt_chooser("Select Version to Compare", choice)
    run(ctx, "compare", lambda m: m.compare_versions(note, chooser))


@main.command("simulate")
@click.argument("note")
@click.pass_context
def simulate_cmd(ctx: click.Context, note: str):
    """Print a simulated execution trace of a note's scenarios."""
    run(ctx, "simulate", lambda m: m.simulate(note))


if __name__ == "__main__":
    main()
