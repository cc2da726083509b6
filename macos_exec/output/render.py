"""Output rendering for resolution results."""

import json
from io import StringIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from macos_exec.models import Resolution, ResolutionSource

SOURCE_LABELS = {
    ResolutionSource.DIRECTORY: "Info.plist of the given bundle",
    ResolutionSource.SPOTLIGHT: "Spotlight index (mdfind)",
    ResolutionSource.MANUAL: "manual scan of application folders",
}


def render_plain(resolution: Resolution) -> str:
    """Just the executable path, for use in scripts."""
    return resolution.executable_path


def render_json(resolution: Resolution) -> str:
    """
    Render a resolution as JSON with sorted keys.
    
    Args:
        resolution: Resolution to render
    
    Returns:
        JSON string
    """
    return json.dumps(resolution.model_dump(mode="json"), indent=2, sort_keys=True)


def render_human(resolution: Resolution) -> str:
    """
    Render a resolution as a table using Rich.
    
    Args:
        resolution: Resolution to render
    
    Returns:
        Formatted string suitable for terminal display
    """
    output_buffer = StringIO()
    console = Console(file=output_buffer, width=120, force_terminal=True)
    
    details = Table.grid(padding=(0, 2))
    details.add_column(style="bold cyan", justify="right")
    details.add_column(style="white")
    
    details.add_row("Target:", f"[bold]{resolution.target}[/bold]")
    details.add_row("Bundle:", resolution.app_path)
    details.add_row("Executable:", f"[green]{resolution.executable_path}[/green]")
    details.add_row("Found via:", f"[dim]{SOURCE_LABELS[resolution.source]}[/dim]")
    
    console.print(Panel(details, title="macos-exec", border_style="cyan", box=box.ROUNDED, padding=(0, 1)))
    
    return output_buffer.getvalue()
