"""keyflay Config implementation."""

from __future__ import annotations

import logging
from typing import Optional

from keyflay.core.geometry.foreground import ForegroundFactors
from keyflay.core.layout.desired_key import DesiredKey

from ._props import float_prop, int_prop
from .defaults import DEFAULTS as _DEFAULTS
from .file_storage import load_config_settings, save_config_settings_atomic
from .paths import config_dir, config_file_path

logger = logging.getLogger(__name__)


class Config:
    """Layout settings persisted as JSON."""

    DEFAULTS = _DEFAULTS

    icon_inset_factor = float_prop("icon_inset_factor", default=0.21, min_v=0.0, max_v=0.5)
    label_inset_factor = float_prop("label_inset_factor", default=0.28, min_v=0.0, max_v=0.5)
    desired_key_width = int_prop("desired_key_width", default=96, min_v=1)
    desired_key_height = int_prop("desired_key_height", default=144, min_v=1)
    key_margin_horizontal = int_prop("key_margin_horizontal", default=4, min_v=0)
    key_margin_vertical = int_prop("key_margin_vertical", default=6, min_v=0)
    container_width = int_prop("container_width", default=1080, min_v=0)

    def __init__(self) -> None:
        # Resolved per instance so tests can point the env vars elsewhere.
        self.CONFIG_DIR = config_dir()
        self.CONFIG_FILE = config_file_path()
        loaded = self._load()
        self._settings = loaded if loaded is not None else dict(self.DEFAULTS)

    def _load(self, *, retries: int = 3, retry_delay: float = 0.02):
        return load_config_settings(
            config_file=self.CONFIG_FILE,
            defaults=self.DEFAULTS,
            retries=retries,
            retry_delay=retry_delay,
            logger=logger,
        )

    def reload(self) -> None:
        loaded = self._load()
        # Keep the previous in-memory settings if the file was transiently unreadable.
        if loaded is not None:
            self._settings = loaded

    def _save(self) -> None:
        save_config_settings_atomic(
            config_dir=self.CONFIG_DIR,
            config_file=self.CONFIG_FILE,
            settings=self._settings,
            logger=logger,
        )

    def foreground_factors(self) -> ForegroundFactors:
        return ForegroundFactors(icon=self.icon_inset_factor, label=self.label_inset_factor)

    def desired_key(
        self,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        margin_h: Optional[int] = None,
        margin_v: Optional[int] = None,
    ) -> DesiredKey:
        """Build the reference key from the configured size and margins.

        Any argument that is not None overrides the stored value for this call
        only. Margins larger than half the key are capped so the visible face
        never leaves the touch rect; sizes are passed through unchanged and a
        non-positive one raises ``DesiredKeyError``.
        """

        width = self.desired_key_width if width is None else int(width)
        height = self.desired_key_height if height is None else int(height)
        margin_h = self.key_margin_horizontal if margin_h is None else int(margin_h)
        margin_v = self.key_margin_vertical if margin_v is None else int(margin_v)
        return DesiredKey.from_size(
            width=width,
            height=height,
            margin_h=_cap_margin(margin_h, width),
            margin_v=_cap_margin(margin_v, height),
        )


def _cap_margin(margin: int, size: int) -> int:
    return min(margin, max(size, 0) // 2)
