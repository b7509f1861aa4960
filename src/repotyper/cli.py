"""CLI interface for RepoTyper using Typer"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from repotyper import __version__
from repotyper.core.config import (
    LOG_FILE,
    load_config,
    create_config,
    config_exists,
    get_config_path,
    ConfigNotFoundError,
    ConfigInvalidError,
)
from repotyper.core.chunking import split_into_chunks
from repotyper.core.comments import remove_comments
from repotyper.core.languages import LANGUAGE_PROFILES, detect_language
from repotyper.core.loader import normalize_line_endings
from repotyper.models.config import TypingSettings

app = typer.Typer(
    name="repotyper",
    help="RepoTyper - practice touch-typing against your own source code",
    invoke_without_command=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    if value:
        console.print(f"repotyper version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Send logs to a file (needed while the TUI owns the terminal) or stderr"""
    level = logging.DEBUG if verbose else logging.INFO
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    else:
        level = logging.DEBUG if verbose else logging.WARNING
        handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help=f"Log file used while the TUI runs (default: {LOG_FILE})"
    ),
):
    """RepoTyper - typing practice on your own code

    Run without arguments to practice on the configured folder.
    """
    ctx.obj = {"verbose": verbose, "log_file": log_file}

    # If a subcommand was invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_config()
    except (ConfigNotFoundError, ConfigInvalidError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _run_practice(config.folder_path, config.settings, verbose, log_file)


def _run_practice(
    folder: Path,
    settings: TypingSettings,
    verbose: bool,
    log_file: Optional[Path],
) -> None:
    """Load the folder and launch the TUI"""
    from repotyper.core.loader import load_project
    from repotyper.tui.app import RepoTyperApp

    if not folder.exists():
        console.print(f"[red]Error:[/red] Folder does not exist: {folder}")
        raise typer.Exit(1)
    if not folder.is_dir():
        console.print(f"[red]Error:[/red] Path is not a directory: {folder}")
        raise typer.Exit(1)

    configure_logging(verbose, log_file or LOG_FILE)

    with console.status(f"Loading {folder}..."):
        project = load_project(folder)

    if not project.files:
        console.print(f"[yellow]No source files found in:[/yellow] {folder}")
        raise typer.Exit(1)

    RepoTyperApp(project, settings).run()

    completed = project.completed_count()
    console.print(f"[green]Completed {completed}/{len(project.files)} file(s)[/green]")


@app.command()
def practice(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(None, help="Folder to practice on (default: configured folder)"),
    stop_on_error: Optional[bool] = typer.Option(
        None, "--stop-on-error/--no-stop-on-error", help="Block the cursor on mistakes"
    ),
):
    """Practice on a folder, overriding the configured one"""
    settings = TypingSettings()
    folder = path
    if config_exists():
        try:
            config = load_config()
        except ConfigInvalidError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        settings = config.settings
        folder = folder or config.folder_path

    if folder is None:
        console.print("[red]Error:[/red] No folder given and no config found")
        console.print("Pass a folder or run [bold]repotyper init[/bold].")
        raise typer.Exit(1)

    if stop_on_error is not None:
        settings.stop_on_error = stop_on_error

    opts = ctx.obj or {}
    _run_practice(folder.resolve(), settings, opts.get("verbose", False), opts.get("log_file"))


@app.command()
def init():
    """Create .repotyper/config.yaml configuration file"""
    if config_exists():
        if not typer.confirm("Config file already exists. Overwrite?"):
            raise typer.Exit(0)

    console.print("[bold]RepoTyper Configuration Setup[/bold]\n")

    folder = typer.prompt(
        "Enter absolute path to the folder with your source code",
        default=str(Path.cwd()),
    )

    # Validate it's absolute
    folder_path = Path(folder)
    if not folder_path.is_absolute():
        console.print("[red]Error:[/red] Path must be absolute")
        raise typer.Exit(1)

    if not folder_path.exists():
        console.print(f"[red]Error:[/red] Folder does not exist: {folder}")
        raise typer.Exit(1)

    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Path is not a directory: {folder}")
        raise typer.Exit(1)

    stop_on_error = typer.confirm("Stop on error (retype mistakes before moving on)?", default=False)

    try:
        config = create_config(folder, stop_on_error=stop_on_error)
    except (ConfigInvalidError, OSError) as e:
        console.print(f"[red]Error creating config:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"\n[green]Created:[/green] {get_config_path()}")
    console.print(f"[dim]Folder:[/dim] {config.folder}")
    console.print("\nRun [bold]repotyper[/bold] to start practicing.")


def _read_source(file: Path, language: Optional[str]) -> Tuple[str, str]:
    """Read a file for the inspection commands"""
    if not file.is_file():
        console.print(f"[red]Error:[/red] File not found: {file}")
        raise typer.Exit(1)
    text = normalize_line_endings(file.read_bytes().decode("utf-8", errors="replace"))
    return text, language or detect_language(file.name)


@app.command()
def strip(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Source file"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language id"),
):
    """Print a file with its comments removed"""
    configure_logging(ctx.obj.get("verbose", False) if ctx.obj else False)
    text, language = _read_source(file, language)
    # Plain print keeps brackets in code from being read as markup
    print(remove_comments(text, language))


@app.command()
def chunks(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Source file"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language id"),
):
    """Show how a file is split into practice sections"""
    configure_logging(ctx.obj.get("verbose", False) if ctx.obj else False)
    text, language = _read_source(file, language)
    sections = split_into_chunks(remove_comments(text, language), language)
    logger.debug("%s split into %d chunk(s)", file, len(sections))

    table = Table(title=f"{file.name} ({language})")
    table.add_column("ID", style="cyan")
    table.add_column("Lines")
    table.add_column("Title", style="green")
    table.add_column("Description")

    for chunk in sections:
        table.add_row(
            chunk.id,
            f"{chunk.start_line}-{chunk.end_line}",
            chunk.title,
            chunk.description,
        )

    console.print(table)


@app.command("languages")
def languages_list():
    """List languages with comment stripping support"""
    table = Table(title="Comment Profiles")
    table.add_column("Language", style="cyan")
    table.add_column("Line comments")
    table.add_column("Block comments")

    for name, profile in LANGUAGE_PROFILES.items():
        line = ", ".join(profile.inline_markers) or "-"
        block = f"{profile.block_start}  {profile.block_end}" if profile.has_block_comments else "-"
        table.add_row(name, line, block)

    console.print(table)


def main():
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    main()
