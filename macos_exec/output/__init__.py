"""Output module for resolution results."""

from .render import render_human, render_json, render_plain

__all__ = ["render_human", "render_json", "render_plain"]
