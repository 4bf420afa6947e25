"""Exception types raised by keyflay.

Layout itself never raises for degenerate numbers (zero width containers,
zero grow/shrink sums). These types cover caller misuse that must surface at
construction time instead of silently during a layout pass.
"""

from __future__ import annotations


class KeyflayError(Exception):
    """Base class for all keyflay errors."""


class ArrangementError(KeyflayError, ValueError):
    """The key arrangement is empty, has an empty row, or carries bad flay factors."""


class DesiredKeyError(KeyflayError, ValueError):
    """The reference touch/visible rectangle pair cannot be used for layout."""


class LayoutReentryError(KeyflayError, RuntimeError):
    """A layout pass was started while another pass on the same keyboard was running."""
