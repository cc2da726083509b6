"""Scanners module for discovering installed applications."""

from .apps import APP_SUFFIX, find_app_bundles

__all__ = ["APP_SUFFIX", "find_app_bundles"]
