"""Exceptions raised while resolving application executables."""

from pathlib import Path


class ExecutableLookupError(Exception):
    """Base class for all executable lookup failures."""


class NotFoundError(ExecutableLookupError):
    """No resolvable executable exists for the requested application."""


class NotInstalledError(NotFoundError):
    """No installed application carries the requested bundle identifier."""
    
    def __init__(self, bundle_id: str):
        self.bundle_id = bundle_id
        super().__init__(f"Not installed: {bundle_id}")


class AppNotFoundError(NotFoundError):
    """A bundle directory has no readable Info.plist."""
    
    def __init__(self, app_dir: str | Path):
        self.app_dir = str(app_dir)
        super().__init__(f"Not an application bundle (no readable Info.plist): {app_dir}")


class InfoPlistError(ExecutableLookupError):
    """An Info.plist could not be loaded."""
    
    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class PlistReadError(InfoPlistError):
    """The Info.plist is missing or unreadable."""


class PlistParseError(InfoPlistError):
    """The Info.plist content is malformed for its detected encoding."""


class ToolUnavailableError(ExecutableLookupError):
    """A system tool needed for the fast search is not installed."""
    
    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Command not found: {tool}")
