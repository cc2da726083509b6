"""Spotlight index queries via mdfind and mdutil."""

import logging

from macos_exec.config import Config
from macos_exec.errors import ToolUnavailableError
from macos_exec.models import IndexAvailability
from macos_exec.util.memo import MemoCell
from macos_exec.util.shell import run

logger = logging.getLogger(__name__)

# mdutil -s prints this for volumes with indexing turned off
INDEXING_DISABLED = "Indexing disabled"


def bundle_id_query(bundle_id: str) -> str:
    """Spotlight query matching applications by bundle identifier."""
    escaped = bundle_id.replace("\\", "\\\\").replace('"', '\\"')
    return f'kMDItemCFBundleIdentifier == "{escaped}"'


async def search_index(bundle_id: str, config: Config | None = None) -> list[str]:
    """
    Ask Spotlight for bundles with the given identifier.
    
    Any failure other than a missing mdfind is treated as "no result":
    a non-zero exit status, or an error spawning the process.
    
    Args:
        bundle_id: CFBundleIdentifier to look for
        config: Configuration naming the mdfind command
    
    Returns:
        Candidate bundle paths in mdfind's order (possibly empty)
    
    Raises:
        ToolUnavailableError: If mdfind is not installed
    """
    config = config or Config()
    cmd = [config.mdfind_path, bundle_id_query(bundle_id)]
    
    try:
        result = await run(cmd)
    except OSError as e:
        logger.debug("mdfind could not be started for %s: %s", bundle_id, e)
        return []
    
    if result.command_not_found:
        raise ToolUnavailableError(config.mdfind_path)
    
    if not result.success:
        logger.debug("mdfind exited with %d for %s: %s", result.code, bundle_id, result.err)
        return []
    
    return [line.strip() for line in result.out.split("\n") if line.strip()]


class SpotlightStatus:
    """
    Tracks whether Spotlight can be used, probing at most once.
    
    The state starts unknown. The first call to ``is_available`` runs
    ``mdutil -s`` on the configured volume and keeps the answer; callers
    arriving while that probe runs share it. ``mark_unavailable`` settles
    the state without probing, e.g. once mdfind turns out to be missing.
    Once settled the state is not probed again; only a missing mdfind can
    still move it to unavailable.
    """
    
    def __init__(self, config: Config | None = None, cell: MemoCell[bool] | None = None):
        self.config = config or Config()
        self._cell: MemoCell[bool] = cell if cell is not None else MemoCell()
        
        if not self.config.use_spotlight and not self._cell.resolved:
            self._cell.set(False)
    
    @property
    def state(self) -> IndexAvailability:
        if not self._cell.resolved:
            return IndexAvailability.UNKNOWN
        return IndexAvailability.from_bool(self._cell.value)
    
    def mark_unavailable(self) -> None:
        if self.state is IndexAvailability.UNAVAILABLE:
            return
        logger.info("Spotlight marked unavailable; falling back to manual scans")
        self._cell.set(False)
    
    async def is_available(self) -> bool:
        return await self._cell.get(self._probe)
    
    async def _probe(self) -> bool:
        result = await run([self.config.mdutil_path, "-s", self.config.index_volume])
        
        if result.command_not_found:
            logger.info("%s not found; Spotlight unavailable", self.config.mdutil_path)
            return False
        
        available = INDEXING_DISABLED not in result.out
        logger.info(
            "Spotlight indexing on %s is %s",
            self.config.index_volume,
            "enabled" if available else "disabled"
        )
        return available
