"""Presentation helpers: the listing table and help text."""

from __future__ import annotations

from .help import BANNER, HELP_LINES
from .listing import format_listing

__all__ = ["BANNER", "HELP_LINES", "format_listing"]
