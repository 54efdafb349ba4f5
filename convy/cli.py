"""CLI interface for convy."""

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from convy.config import CONFIG_FILENAME, load_config, write_default_config
from convy.errors import ConfigError
from convy.parser import CommitMessageParser


console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


SCISSORS_LINE = "# ------------------------ >8 ------------------------"


def strip_git_comments(message: str) -> str:
    """Clean a message file the way `git commit` does before recording it.

    Drops everything from the scissors line onward (`git commit -v`) and
    every line starting with '#'.
    """
    lines = []
    for line in message.splitlines():
        if line.rstrip() == SCISSORS_LINE:
            break
        if line.startswith("#"):
            continue
        lines.append(line)
    return "\n".join(lines)


def read_message(commit, message_file, strip_comments: bool = True) -> str:
    """Pick the commit message from the argument or the file option.

    Git comment lines are stripped from file input unless strip_comments
    is False.

    Raises:
        click.UsageError: If neither or both sources are given
    """
    if commit is not None and message_file is not None:
        raise click.UsageError("Pass either COMMIT or --file, not both.")
    if commit is not None:
        return commit
    if message_file is not None:
        message = message_file.read()
        return strip_git_comments(message) if strip_comments else message
    raise click.UsageError("Missing commit message: pass COMMIT or --file.")


@click.group()
@click.version_option()
def cli():
    """Convy - Conventional Commits validator."""
    pass


@cli.command()
@click.argument("commit", required=False)
@click.option(
    "-f",
    "--file",
    "message_file",
    type=click.File("r", encoding="utf-8"),
    help="Read the message from a file ('-' for stdin), e.g. from a commit-msg hook",
)
@click.option(
    "--strip-comments/--keep-comments",
    default=True,
    show_default=True,
    help="Drop git comment lines and the scissors section from --file input",
)
@click.option("-c", "--config", "config_path", type=click.Path(), help="Config file path")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed message as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def parse(commit, message_file, strip_comments, config_path, as_json, verbose):
    """Validate a commit message."""
    configure_logging(verbose)
    message = read_message(commit, message_file, strip_comments)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    result = CommitMessageParser(config).check(message)

    if not result.is_valid:
        if as_json:
            click.echo(
                json.dumps(
                    {
                        "valid": False,
                        "errors": [
                            {"kind": e.kind, "message": str(e)} for e in result.violations
                        ],
                    },
                    indent=2,
                )
            )
        else:
            console.print(f"[red]Error ({result.error_kind}): {escape(str(result.error))}[/red]")
            if verbose and len(result.violations) > 1:
                for violation in result.violations[1:]:
                    console.print(f"  [yellow]- {violation.kind}: {escape(str(violation))}[/yellow]")
            console.print("[red]Commit message is invalid![/red]")
        sys.exit(1)

    commit_message = result.commit

    if as_json:
        click.echo(json.dumps({"valid": True, "commit": commit_message.to_dict()}, indent=2))
        return

    console.print("[green]Commit message is valid![/green]")

    if verbose:
        table = Table(title="Parsed Commit")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Type", commit_message.commit_type)
        table.add_row("Scope", escape(commit_message.scope or "-"))
        table.add_row("Breaking", "yes" if commit_message.breaking else "no")
        table.add_row("Description", escape(commit_message.description))
        table.add_row("Body", escape(commit_message.body or "-"))
        for footer in commit_message.footers:
            table.add_row(escape(f"Footer: {footer.token}"), escape(footer.value or "-"))

        console.print(table)


@cli.command()
@click.option(
    "-p",
    "--path",
    type=click.Path(dir_okay=False),
    default=CONFIG_FILENAME,
    show_default=True,
    help="Where to write the config file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(path, force):
    """Write a default configuration file."""
    try:
        written = write_default_config(path, force=force)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[green]Config written to {written}[/green]")


@cli.command()
@click.option("-c", "--config", "config_path", type=click.Path(), help="Config file path")
def types(config_path):
    """List the allowed commit types."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title="Allowed Commit Types")
    table.add_column("Type", style="cyan")
    table.add_column("Source", style="green")

    for commit_type in sorted(config.allowed_types):
        source = "custom" if commit_type in config.additional_types else "built-in"
        table.add_row(commit_type, source)

    console.print(table)
