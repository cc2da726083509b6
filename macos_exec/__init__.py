"""Locate the main executable of installed macOS applications."""

__version__ = "0.1.0"

from macos_exec.errors import (
    AppNotFoundError,
    ExecutableLookupError,
    InfoPlistError,
    NotFoundError,
    NotInstalledError,
    PlistParseError,
    PlistReadError,
)
from macos_exec.resolver import (
    ExecutableResolver,
    find_executable_by_id,
    find_executable_in_app,
    get_resolver,
    reset_default_resolver,
)

__all__ = [
    "__version__",
    "AppNotFoundError",
    "ExecutableLookupError",
    "InfoPlistError",
    "NotFoundError",
    "NotInstalledError",
    "PlistParseError",
    "PlistReadError",
    "ExecutableResolver",
    "find_executable_by_id",
    "find_executable_in_app",
    "get_resolver",
    "reset_default_resolver",
]
