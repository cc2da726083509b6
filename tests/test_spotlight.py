"""Tests for Spotlight search and availability detection."""

import asyncio
import unittest
from unittest.mock import AsyncMock, patch

from macos_exec.collectors.spotlight import (
    INDEXING_DISABLED,
    SpotlightStatus,
    bundle_id_query,
    search_index,
)
from macos_exec.config import Config
from macos_exec.errors import ToolUnavailableError
from macos_exec.models import IndexAvailability
from macos_exec.util.shell import COMMAND_NOT_FOUND, ShellResult

MDUTIL_ENABLED = "/:\n\tIndexing enabled."
MDUTIL_DISABLED = f"/:\n\t{INDEXING_DISABLED}."


class TestSearchIndex(unittest.IsolatedAsyncioTestCase):
    """Test mdfind invocation and output handling."""
    
    def test_query(self):
        self.assertEqual(
            bundle_id_query("com.apple.Safari"),
            'kMDItemCFBundleIdentifier == "com.apple.Safari"'
        )
        self.assertEqual(bundle_id_query('a"b'), 'kMDItemCFBundleIdentifier == "a\\"b"')
    
    async def test_returns_candidates_in_order(self):
        output = "/Applications/Safari.app\n/Volumes/Backup/Applications/Safari.app"
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=ShellResult(0, output, ""))) as run:
            found = await search_index("com.apple.Safari")
        
        self.assertEqual(found, ["/Applications/Safari.app", "/Volumes/Backup/Applications/Safari.app"])
        run.assert_awaited_once_with(["mdfind", 'kMDItemCFBundleIdentifier == "com.apple.Safari"'])
    
    async def test_uses_configured_command(self):
        config = Config(mdfind_path="/opt/bin/mdfind")
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=ShellResult(0, "", ""))) as run:
            self.assertEqual(await search_index("com.example.app", config), [])
        self.assertEqual(run.await_args.args[0][0], "/opt/bin/mdfind")
    
    async def test_missing_mdfind(self):
        result = ShellResult(COMMAND_NOT_FOUND, "", "mdfind: command not found")
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=result)):
            with self.assertRaises(ToolUnavailableError):
                await search_index("com.example.app")
    
    async def test_failed_search_is_no_result(self):
        result = ShellResult(1, "/Applications/Partial.app", "error")
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=result)):
            self.assertEqual(await search_index("com.example.app"), [])
    
    async def test_spawn_error_is_no_result(self):
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(side_effect=PermissionError("denied"))):
            self.assertEqual(await search_index("com.example.app"), [])


class TestSpotlightStatus(unittest.IsolatedAsyncioTestCase):
    """Test availability state transitions."""
    
    async def test_starts_unknown(self):
        self.assertEqual(SpotlightStatus().state, IndexAvailability.UNKNOWN)
    
    async def test_probe_enabled(self):
        status = SpotlightStatus()
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=ShellResult(0, MDUTIL_ENABLED, ""))) as run:
            self.assertTrue(await status.is_available())
        
        run.assert_awaited_once_with(["mdutil", "-s", "/"])
        self.assertEqual(status.state, IndexAvailability.AVAILABLE)
    
    async def test_probe_disabled(self):
        status = SpotlightStatus()
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=ShellResult(0, MDUTIL_DISABLED, ""))):
            self.assertFalse(await status.is_available())
        self.assertEqual(status.state, IndexAvailability.UNAVAILABLE)
    
    async def test_missing_mdutil_means_unavailable(self):
        status = SpotlightStatus()
        result = ShellResult(COMMAND_NOT_FOUND, "", "mdutil: command not found")
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=result)):
            self.assertFalse(await status.is_available())
    
    async def test_probe_runs_once(self):
        """Concurrent and later checks reuse a single probe."""
        status = SpotlightStatus()
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=ShellResult(0, MDUTIL_ENABLED, ""))) as run:
            results = await asyncio.gather(status.is_available(), status.is_available())
            self.assertTrue(await status.is_available())
        
        self.assertEqual(results, [True, True])
        self.assertEqual(run.await_count, 1)
    
    async def test_mark_unavailable_skips_probe(self):
        status = SpotlightStatus()
        status.mark_unavailable()
        
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock()) as run:
            self.assertFalse(await status.is_available())
        
        run.assert_not_awaited()
        self.assertEqual(status.state, IndexAvailability.UNAVAILABLE)
    
    async def test_mark_unavailable_overrides_available(self):
        status = SpotlightStatus()
        with patch("macos_exec.collectors.spotlight.run", new=AsyncMock(return_value=ShellResult(0, MDUTIL_ENABLED, ""))):
            await status.is_available()
        
        status.mark_unavailable()
        self.assertEqual(status.state, IndexAvailability.UNAVAILABLE)
    
    async def test_disabled_by_config(self):
        status = SpotlightStatus(Config(use_spotlight=False))
        self.assertEqual(status.state, IndexAvailability.UNAVAILABLE)


if __name__ == "__main__":
    unittest.main()
