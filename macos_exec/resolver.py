"""Resolution of installed applications to their main executables."""

import logging
from pathlib import Path

from macos_exec.collectors.info_plist import executable_path, read_info_plist
from macos_exec.collectors.spotlight import SpotlightStatus, search_index
from macos_exec.config import Config
from macos_exec.errors import AppNotFoundError, NotInstalledError, PlistReadError, ToolUnavailableError
from macos_exec.index import AppIndex
from macos_exec.models import IndexAvailability, Resolution, ResolutionSource

logger = logging.getLogger(__name__)


class ExecutableResolver:
    """
    Finds the main executable of an application bundle.
    
    Bundle identifiers are looked up in Spotlight first. When Spotlight is
    missing, disabled, or has no answer while indexing is off, the lookup
    falls back to a scan of the configured application folders.
    
    The Spotlight availability and the scan index are each computed at most
    once per resolver and shared by every lookup it serves.
    
    Example:
        >>> resolver = ExecutableResolver()
        >>> await resolver.find_executable_by_id("com.apple.Safari")
        '/Applications/Safari.app/Contents/MacOS/Safari'
    """
    
    def __init__(
        self,
        config: Config | None = None,
        spotlight: SpotlightStatus | None = None,
        app_index: AppIndex | None = None
    ):
        self.config = config or Config()
        self.spotlight = spotlight or SpotlightStatus(self.config)
        self.app_index = app_index or AppIndex(self.config.scan_roots)
    
    async def find_executable_in_app(self, app_dir: str | Path) -> str:
        """Executable path of a known bundle directory."""
        return (await self.resolve_app(app_dir)).executable_path
    
    async def find_executable_by_id(self, bundle_id: str) -> str:
        """Executable path of the installed app with this bundle identifier."""
        return (await self.resolve_bundle_id(bundle_id)).executable_path
    
    async def resolve_app(self, app_dir: str | Path) -> Resolution:
        """
        Resolve a bundle directory through its Info.plist.
        
        Raises:
            AppNotFoundError: If the bundle has no readable Info.plist
            PlistParseError: If the Info.plist is malformed
        """
        try:
            plist = await read_info_plist(app_dir)
        except PlistReadError as e:
            raise AppNotFoundError(app_dir) from e
        
        return Resolution(
            target=str(app_dir),
            app_path=str(app_dir),
            executable_path=executable_path(app_dir, plist),
            source=ResolutionSource.DIRECTORY
        )
    
    async def resolve_bundle_id(self, bundle_id: str) -> Resolution:
        """
        Resolve a bundle identifier, via Spotlight or the manual scan.
        
        Raises:
            NotInstalledError: If no installed app has this identifier
            InfoPlistError: If Spotlight found a bundle whose Info.plist
                cannot be read or parsed
        """
        if self.spotlight.state is not IndexAvailability.UNAVAILABLE:
            app_dir = await self._search_spotlight(bundle_id)
            
            if app_dir:
                plist = await read_info_plist(app_dir)
                return Resolution(
                    target=bundle_id,
                    app_path=app_dir,
                    executable_path=executable_path(app_dir, plist),
                    source=ResolutionSource.SPOTLIGHT
                )
            
            # No answer: only trust it if the index is actually on
            if self.spotlight.state is not IndexAvailability.UNAVAILABLE:
                if await self.spotlight.is_available():
                    raise NotInstalledError(bundle_id)
        
        return await self._search_manually(bundle_id)
    
    async def _search_spotlight(self, bundle_id: str) -> str | None:
        try:
            candidates = await search_index(bundle_id, self.config)
        except ToolUnavailableError as e:
            logger.debug("%s", e)
            self.spotlight.mark_unavailable()
            return None
        
        if not candidates:
            logger.debug("Spotlight has no match for %s", bundle_id)
            return None
        
        # Several matches: the first one wins
        return candidates[0]
    
    async def _search_manually(self, bundle_id: str) -> Resolution:
        record = await self.app_index.lookup(bundle_id)
        if record is None:
            raise NotInstalledError(bundle_id)
        
        return Resolution(
            target=bundle_id,
            app_path=record.app_path,
            executable_path=executable_path(record.app_path, record.plist),
            source=ResolutionSource.MANUAL
        )


_default_resolver: ExecutableResolver | None = None


def get_resolver() -> ExecutableResolver:
    """The process-wide resolver behind the module-level lookup functions."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ExecutableResolver()
    return _default_resolver


def set_default_resolver(resolver: ExecutableResolver | None) -> None:
    """Replace the process-wide resolver; None drops it along with its caches."""
    global _default_resolver
    _default_resolver = resolver


def reset_default_resolver() -> None:
    set_default_resolver(None)


async def find_executable_in_app(app_dir: str | Path) -> str:
    """
    Find the main executable inside an application bundle.
    
    Args:
        app_dir: Path to the .app bundle
    
    Returns:
        Full path to the executable named by the bundle's Info.plist
    """
    return await get_resolver().find_executable_in_app(app_dir)


async def find_executable_by_id(bundle_id: str) -> str:
    """
    Find the main executable of an installed application.
    
    Args:
        bundle_id: CFBundleIdentifier, e.g. 'com.apple.Safari'
    
    Returns:
        Full path to the application's executable
    
    Raises:
        NotInstalledError: If no installed app has this identifier
    """
    return await get_resolver().find_executable_by_id(bundle_id)
