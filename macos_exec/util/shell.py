"""Async subprocess execution utilities."""

import asyncio
from dataclasses import dataclass

# Exit code a shell reports when the command itself does not exist
COMMAND_NOT_FOUND = 127


@dataclass
class ShellResult:
    """Result from a command execution."""
    
    code: int
    out: str
    err: str
    
    @property
    def success(self) -> bool:
        """Check if the command succeeded (exit code 0)."""
        return self.code == 0
    
    @property
    def command_not_found(self) -> bool:
        """Check if the command executable could not be found."""
        return self.code == COMMAND_NOT_FOUND
    
    def __bool__(self) -> bool:
        """Allow using result in boolean context (True if successful)."""
        return self.success


async def run(cmd: list[str]) -> ShellResult:
    """
    Execute a command without shell interpretation.
    
    The calling task is suspended while the process runs; other tasks on
    the event loop keep going. A missing executable is reported the way a
    shell would report it, with exit code 127, instead of raising.
    
    Args:
        cmd: Command and arguments as a list of strings (e.g., ['mdutil', '-s', '/'])
    
    Returns:
        ShellResult with exit code, stdout, and stderr
    
    Raises:
        OSError: If the process cannot be spawned for another reason
    
    Example:
        >>> result = await run(['mdutil', '-s', '/'])
        >>> if result.success:
        ...     print(result.out)
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE
        )
    except FileNotFoundError:
        return ShellResult(
            code=COMMAND_NOT_FOUND,
            out="",
            err=f"{cmd[0]}: command not found"
        )
    
    stdout, stderr = await proc.communicate()
    
    return ShellResult(
        code=proc.returncode,
        out=_normalize_output(stdout.decode("utf-8", errors="replace")),
        err=_normalize_output(stderr.decode("utf-8", errors="replace"))
    )


def _normalize_output(text: str) -> str:
    """
    Normalize command output: convert line endings and trim whitespace.
    
    Args:
        text: Raw output from subprocess
    
    Returns:
        Normalized string with consistent line endings and trimmed whitespace
    """
    if not text:
        return ""
    
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.strip()
