"""Info.plist loading and executable path derivation for .app bundles.

An application's Info.plist comes in one of two encodings: XML, or the
compact binary format that starts with the magic bytes ``bplist``. The
encoding is detected from the file content, never from the file name.
"""

import asyncio
import os
import plistlib
import warnings
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from macos_exec.errors import PlistParseError, PlistReadError
from macos_exec.models import EXECUTABLE_KEY

BINARY_PLIST_MAGIC = b"bplist"


def info_plist_path(app_dir: str | Path) -> Path:
    """Location of the Info.plist inside a bundle."""
    return Path(app_dir) / "Contents" / "Info.plist"


def is_binary_plist(data: bytes) -> bool:
    """Check if plist content uses the binary encoding."""
    return data[:len(BINARY_PLIST_MAGIC)] == BINARY_PLIST_MAGIC


def parse_info_plist(data: bytes, path: str | Path = "<bytes>", quiet: bool = True) -> dict[str, Any]:
    """
    Decode Info.plist content in either encoding.
    
    Args:
        data: Raw file content
        path: File the content came from, used in error messages
        quiet: Suppress non-fatal warnings raised while decoding XML
    
    Returns:
        Decoded top-level dictionary
    
    Raises:
        PlistParseError: If the content is malformed for its encoding or the
            top-level object is not a dictionary
    """
    if is_binary_plist(data):
        fmt = plistlib.FMT_BINARY
        plist = _decode(data, fmt, path)
    else:
        fmt = plistlib.FMT_XML
        if quiet:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                plist = _decode(data, fmt, path)
        else:
            plist = _decode(data, fmt, path)
    
    if not isinstance(plist, dict):
        raise PlistParseError(path, f"expected a dictionary, got {type(plist).__name__}")
    
    return plist


def _decode(data: bytes, fmt: plistlib.PlistFormat, path: str | Path) -> Any:
    try:
        return plistlib.loads(data, fmt=fmt)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        AttributeError,
        IndexError,
        KeyError,
        OverflowError,
        RecursionError,
        TypeError,
        ValueError,
    ) as e:
        kind = "binary" if fmt == plistlib.FMT_BINARY else "XML"
        raise PlistParseError(path, f"invalid {kind} plist: {e}") from e


async def read_info_plist(app_dir: str | Path) -> dict[str, Any]:
    """
    Load and decode the Info.plist of an application bundle.
    
    Args:
        app_dir: Path to the .app bundle
    
    Returns:
        Decoded Info.plist dictionary
    
    Raises:
        PlistReadError: If the file is missing or unreadable
        PlistParseError: If the file content is malformed
    
    Example:
        >>> plist = await read_info_plist("/Applications/Safari.app")
        >>> plist["CFBundleIdentifier"]
        'com.apple.Safari'
    """
    path = info_plist_path(app_dir)
    
    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise PlistReadError(path, e.strerror or str(e)) from e
    
    return parse_info_plist(data, path, quiet=True)


def executable_path(app_dir: str | Path, plist: dict[str, Any]) -> str:
    """
    Conventional path of a bundle's main executable.
    
    The path is ``<app_dir>/Contents/MacOS/<CFBundleExecutable>``. It is not
    checked for existence. A plist without a string CFBundleExecutable
    yields the MacOS directory itself with an empty final segment.
    """
    name = plist.get(EXECUTABLE_KEY)
    if not isinstance(name, str):
        name = ""
    return os.path.join(str(app_dir), "Contents", "MacOS", name)
