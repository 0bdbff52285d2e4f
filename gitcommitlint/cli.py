#!/usr/bin/env python3
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

import click
import pyperclip
from git import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from rich.console import Console

from . import __version__
from .config import DEFAULT_CONFIG_FILENAME, Config
from .core import CommitLinter
from .observers import ConsoleLogObserver, FileLogObserver

console = Console()


def read_commit_message(repo_path: Path, file: TextIO, rev: Optional[str]) -> str:
    """Read the commit message from a git revision, or else from a file or stdin."""
    if rev is not None:
        repo = Repo(repo_path, search_parent_directories=True)
        message = repo.commit(rev).message
        return message.decode("utf-8") if isinstance(message, bytes) else message
    return file.read()


def print_config(config: Config, config_path: Path) -> None:
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<22} {'Value':<20} {'Source':<10}")
    console.print("-" * 52)
    for name in ("fail_fast", "always_log", "log_file", "log_directory"):
        value = getattr(config, name)
        console.print(f"{name:<22} {str(value if value is not None else 'None'):<20} {source:<10}", highlight=False)

    console.print(f"\n{'Rule':<22} {'Level':<20} {'Source':<10}")
    console.print("-" * 52)
    enabled = {rule.NAME: rule for rule in config.rules.build()}
    for field in type(config.rules).model_fields.values():
        rule = enabled.get(field.alias)
        level = rule.resolve_level().value if rule else "disabled"
        console.print(f"{field.alias:<22} {level:<20} {source:<10}", highlight=False)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


@click.command()
@click.option(
    "--config-dir",
    is_flag=True,
    help="Display the config file location and copy it to clipboard",
)
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-f",
    "--file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="File holding the commit message, e.g. .git/COMMIT_EDITMSG in a commit-msg hook (defaults to stdin)",
)
@click.option(
    "-r",
    "--rev",
    help="Lint the message of this git revision (e.g. HEAD) instead of --file or stdin",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first violation (overrides config setting)",
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log lint results (overrides config setting)",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    config_dir: bool,
    config_list: bool,
    path: Path,
    file: TextIO,
    rev: Optional[str],
    fail_fast: bool,
    log_file: Optional[Path],
    version: bool,
):
    """
    Lint a commit message against the configured policy rules.

    The message is read from --rev if given, otherwise from --file or
    standard input.
    Any error-level violation makes the command exit with status 1;
    warnings are reported but do not fail the run.

    Configuration can be set in .gitcommitlint.toml in the repository root.
    Command line options override configuration file settings.
    """
    exit_code = 0
    try:
        if version:
            console.print(f"gitcommitlint {__version__}")
            return

        repo_path = path.absolute()
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if config_list:
            print_config(Config.load(repo_path), config_path)
            return

        if config_dir:
            config_path_str = str(config_path)

            # Create default config file if it doesn't exist
            if not config_path.exists():
                Config().save(repo_path)
                console.print(
                    "[yellow]Created new config file with default values[/yellow]"
                )

            pyperclip.copy(config_path_str)
            console.print(f"[green]Config file location:[/green] {config_path_str}")
            console.print("[green]Path copied to clipboard![/green]")
            return

        config = Config.load(repo_path)

        # Command line options override config
        if fail_fast:
            config.fail_fast = True
        if log_file is not None:
            config.log_file = str(log_file)

        linter = CommitLinter.from_config(config)
        linter.add_observer(ConsoleLogObserver(console))

        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            linter.add_observer(FileLogObserver(str(log_file_path)))

        try:
            raw = read_commit_message(repo_path, file, rev)
            result = linter.lint_text(raw)
        except (
            OSError,
            UnicodeDecodeError,
            ValueError,
            BadName,
            BadObject,
            GitCommandError,
            InvalidGitRepositoryError,
            NoSuchPathError,
        ) as e:
            console.print(f"[red]Error: {str(e)}[/red]")
            exit_code = 1
        else:
            exit_code = result.exit_code
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        exit_code = 130
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
