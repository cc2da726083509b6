"""Recursive .app bundle discovery."""

import asyncio
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

APP_SUFFIX = ".app"


async def find_app_bundles(root: str | Path) -> list[str]:
    """
    Find every .app bundle below a directory.
    
    Bundles are not descended into; every other directory is, to any
    depth, with sibling subtrees scanned concurrently. A subtree that
    cannot be listed contributes nothing and does not stop the scan.
    
    Args:
        root: Directory to scan
    
    Returns:
        Full paths of the bundles found. Order across sibling subtrees
        is not defined.
    
    Example:
        >>> await find_app_bundles("/Applications")
        ['/Applications/Safari.app', '/Applications/Utilities/Terminal.app', ...]
    """
    try:
        dirs = await asyncio.to_thread(_list_directories, Path(root))
    except OSError as e:
        logger.debug("Skipping %s: %s", root, e)
        return []
    
    app_dirs = [str(d) for d in dirs if d.name.endswith(APP_SUFFIX)]
    other_dirs = [d for d in dirs if not d.name.endswith(APP_SUFFIX)]
    
    nested = await asyncio.gather(*(find_app_bundles(d) for d in other_dirs))
    
    for found in nested:
        app_dirs.extend(found)
    return app_dirs


def _list_directories(root: Path) -> list[Path]:
    """Immediate subdirectories of root, not following symlinks."""
    with os.scandir(root) as entries:
        return [Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False)]
