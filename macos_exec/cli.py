"""Command-line interface for macos-exec."""

import asyncio
import logging
import platform
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from macos_exec import __version__
from macos_exec.config import load_config, save_example_config
from macos_exec.errors import InfoPlistError, NotFoundError
from macos_exec.output.render import render_human, render_json, render_plain
from macos_exec.resolver import ExecutableResolver
from macos_exec.scanners.apps import APP_SUFFIX

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        print(f"macos-exec version {__version__}")
        raise typer.Exit()


def looks_like_app_dir(target: str) -> bool:
    """Guess whether a target names a bundle directory rather than a bundle identifier."""
    return target.rstrip("/").endswith(APP_SUFFIX) or Path(target).expanduser().is_dir()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True
    )


@app.command()
def locate(
    target: Optional[str] = typer.Argument(
        None,
        help="Application bundle directory (e.g. /Applications/Safari.app) or bundle identifier (e.g. com.apple.Safari)"
    ),
    by_id: bool = typer.Option(
        False,
        "--id",
        help="Treat TARGET as a bundle identifier"
    ),
    by_app: bool = typer.Option(
        False,
        "--app",
        help="Treat TARGET as an application bundle directory"
    ),
    json: bool = typer.Option(
        False,
        "--json",
        help="Output the result in JSON format"
    ),
    details: bool = typer.Option(
        False,
        "--details",
        help="Show the bundle path and how the executable was found"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to configuration file (default: ~/.macos-exec.yaml)"
    ),
    generate_config: Optional[Path] = typer.Option(
        None,
        "--generate-config",
        help="Generate example configuration file at specified path and exit"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log lookup progress to stderr"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """
    Print the path of an installed application's main executable.
    
    TARGET is looked up as a bundle directory if it ends in .app or is an
    existing directory, otherwise as a bundle identifier. Use --id or --app
    to decide explicitly.
    
    Examples:
        macos-exec com.apple.Safari                    # Look up by bundle identifier
        macos-exec /Applications/Safari.app            # Look up by bundle directory
        macos-exec com.apple.Safari --json             # Machine-readable result
        macos-exec com.apple.Safari --details -v       # Show how it was found
        macos-exec --generate-config ~/.macos-exec.yaml  # Create example config
    """
    if generate_config:
        try:
            save_example_config(generate_config)
        except OSError as e:
            err_console.print(f"[red]Error generating config:[/red] {e}")
            raise typer.Exit(2)
        err_console.print(f"[green]✓[/green] Example configuration saved to {generate_config}")
        raise typer.Exit(0)
    
    if not target:
        err_console.print("[red]Error:[/red] TARGET is required")
        raise typer.Exit(2)
    
    if by_id and by_app:
        err_console.print("[red]Error:[/red] --id and --app cannot be used together")
        raise typer.Exit(2)
    
    if platform.system() != "Darwin":
        err_console.print("[red]Error:[/red] This tool only works on macOS")
        raise typer.Exit(2)
    
    _configure_logging(verbose)
    
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]Error loading configuration:[/red] {e}")
        raise typer.Exit(2)
    
    resolver = ExecutableResolver(config)
    use_app_dir = by_app or (not by_id and looks_like_app_dir(target))
    
    try:
        if use_app_dir:
            resolution = asyncio.run(resolver.resolve_app(target))
        else:
            resolution = asyncio.run(resolver.resolve_bundle_id(target))
    except NotFoundError as e:
        err_console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)
    except InfoPlistError as e:
        err_console.print(f"[red]✗ Corrupt Info.plist:[/red] {e}")
        raise typer.Exit(3)
    
    if json:
        print(render_json(resolution))
    elif details:
        sys.stdout.write(render_human(resolution))
    else:
        print(render_plain(resolution))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
