"""Tests for recursive .app bundle discovery."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from macos_exec.scanners import apps
from macos_exec.scanners.apps import find_app_bundles


class TestFindAppBundles(unittest.IsolatedAsyncioTestCase):
    """Test directory tree scanning."""
    
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
    
    def tearDown(self):
        self.temp_dir.cleanup()
    
    def _mkdirs(self, *relative_paths: str) -> None:
        for relative in relative_paths:
            (self.root / relative).mkdir(parents=True, exist_ok=True)
    
    async def test_finds_nested_bundles(self):
        """Bundles at any depth are found; plain directories are not reported."""
        self._mkdirs(
            "Top.app/Contents/MacOS",
            "Utilities/Tool.app/Contents",
            "Vendor/Suite/Deep/Nested.app",
            "Vendor/Empty/Leaf",
        )
        
        found = await find_app_bundles(self.root)
        
        self.assertCountEqual(found, [
            str(self.root / "Top.app"),
            str(self.root / "Utilities" / "Tool.app"),
            str(self.root / "Vendor" / "Suite" / "Deep" / "Nested.app"),
        ])
    
    async def test_does_not_descend_into_bundles(self):
        self._mkdirs("Outer.app/Contents/Helpers/Inner.app/Contents")
        
        found = await find_app_bundles(self.root)
        
        self.assertEqual(found, [str(self.root / "Outer.app")])
    
    async def test_ignores_files_with_app_suffix(self):
        self._mkdirs("Real.app")
        (self.root / "Fake.app").write_text("not a directory")
        
        found = await find_app_bundles(self.root)
        
        self.assertEqual(found, [str(self.root / "Real.app")])
    
    async def test_missing_root(self):
        self.assertEqual(await find_app_bundles(self.root / "missing"), [])
    
    async def test_unreadable_subtree_does_not_abort_scan(self):
        """A permission error in one subtree still returns bundles from its siblings."""
        self._mkdirs(
            "Locked/Hidden.app",
            "Open/Visible.app",
            "Sibling.app",
        )
        locked = self.root / "Locked"
        real_list = apps._list_directories
        
        def list_directories(root):
            if root == locked:
                raise PermissionError(13, "Permission denied", str(root))
            return real_list(root)
        
        with patch.object(apps, "_list_directories", side_effect=list_directories):
            found = await find_app_bundles(self.root)
        
        self.assertCountEqual(found, [
            str(self.root / "Open" / "Visible.app"),
            str(self.root / "Sibling.app"),
        ])
    
    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    async def test_does_not_follow_directory_symlinks(self):
        self._mkdirs("Elsewhere/Linked.app")
        os.symlink(self.root / "Elsewhere", self.root / "Alias")
        
        found = await find_app_bundles(self.root)
        
        self.assertEqual(found, [str(self.root / "Elsewhere" / "Linked.app")])


if __name__ == "__main__":
    unittest.main()
