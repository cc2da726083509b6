"""Collectors for application metadata and the Spotlight index."""

from .info_plist import executable_path, info_plist_path, parse_info_plist, read_info_plist
from .spotlight import INDEXING_DISABLED, SpotlightStatus, search_index

__all__ = [
    "executable_path",
    "info_plist_path",
    "parse_info_plist",
    "read_info_plist",
    "INDEXING_DISABLED",
    "SpotlightStatus",
    "search_index",
]
