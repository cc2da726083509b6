"""Bundle identifier index built by scanning application folders."""

import asyncio
import logging
from typing import Sequence

from macos_exec.collectors.info_plist import read_info_plist
from macos_exec.config import DEFAULT_SCAN_ROOT
from macos_exec.errors import InfoPlistError
from macos_exec.models import AppRecord
from macos_exec.scanners.apps import find_app_bundles
from macos_exec.util.memo import MemoCell

logger = logging.getLogger(__name__)


class AppIndex:
    """
    Maps bundle identifiers to installed applications.
    
    The index is built on first use by scanning the configured roots and
    reading every bundle's Info.plist. It is built at most once; callers
    arriving during the build wait for the same build. It is never
    refreshed, so apps installed or removed afterwards are not seen
    until ``reset``.
    """
    
    def __init__(self, roots: Sequence[str] = (DEFAULT_SCAN_ROOT,), cell: MemoCell[dict[str, AppRecord]] | None = None):
        self.roots = list(roots)
        self._cell: MemoCell[dict[str, AppRecord]] = cell if cell is not None else MemoCell()
    
    @property
    def built(self) -> bool:
        return self._cell.resolved
    
    async def get(self) -> dict[str, AppRecord]:
        """Return the index, building it if this is the first request."""
        return await self._cell.get(self._build)
    
    async def lookup(self, bundle_id: str) -> AppRecord | None:
        return (await self.get()).get(bundle_id)
    
    def reset(self) -> None:
        self._cell.reset()
    
    async def _build(self) -> dict[str, AppRecord]:
        scans = await asyncio.gather(*(find_app_bundles(root) for root in self.roots))
        app_dirs = [app_dir for found in scans for app_dir in found]
        
        records = await asyncio.gather(*(_load_record(app_dir) for app_dir in app_dirs))
        
        index: dict[str, AppRecord] = {}
        for record in records:
            if record is not None and record.is_usable():
                # On a duplicate identifier the later bundle wins
                index[record.bundle_id] = record
        
        logger.info(
            "Indexed %d of %d application bundles under %s",
            len(index), len(app_dirs), ", ".join(self.roots)
        )
        return index


async def _load_record(app_dir: str) -> AppRecord | None:
    try:
        plist = await read_info_plist(app_dir)
    except InfoPlistError as e:
        logger.debug("Skipping %s: %s", app_dir, e)
        return None
    return AppRecord(app_path=app_dir, plist=plist)
