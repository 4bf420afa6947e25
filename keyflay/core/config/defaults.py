"""Default configuration values."""

from __future__ import annotations

DEFAULTS: dict = {
    # Foreground inset fractions (see core.geometry.foreground).
    "icon_inset_factor": 0.21,
    "label_inset_factor": 0.28,
    # Desired (reference) key, in pixels. The visible face is inset by the
    # margins on each side of the touch rect.
    "desired_key_width": 96,
    "desired_key_height": 144,
    "key_margin_horizontal": 4,
    "key_margin_vertical": 6,
    # Container width used when no host measurement is available (CLI).
    "container_width": 1080,
}
