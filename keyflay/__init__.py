"""Row-based keyboard geometry: flay layout of touch, visible and foreground bounds."""

from __future__ import annotations

__version__ = "0.1.0"
