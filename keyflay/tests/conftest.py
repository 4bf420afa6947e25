from __future__ import annotations

import os
import tempfile
from typing import Callable, Sequence

import pytest


# Never read or write the user's real config during pytest.
os.environ.setdefault("KEYFLAY_CONFIG_DIR", tempfile.mkdtemp(prefix="keyflay-test-config-"))


@pytest.fixture(autouse=True)
def _reset_log_throttle():
    from keyflay.core.logging_utils import reset_throttle

    reset_throttle()
    yield
    reset_throttle()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at an empty per-test directory."""

    cfg_dir = tmp_path / "cfg"
    monkeypatch.setenv("KEYFLAY_CONFIG_DIR", str(cfg_dir))
    monkeypatch.delenv("KEYFLAY_CONFIG_PATH", raising=False)
    return cfg_dir


@pytest.fixture
def desired_key():
    """100x100 touch rect with a 5px / 10px visible margin."""

    from keyflay.core.layout.desired_key import DesiredKey

    return DesiredKey.from_size(width=100, height=100, margin_h=5, margin_v=10)


@pytest.fixture
def keyboard_factory() -> Callable[..., object]:
    """Build a TextKeyboard from rows of flay tuples.

    Each key is either a width factor or a ``(width, grow, shrink)`` tuple.
    """

    from keyflay.core.keyboard.keyboard import TextKeyboard
    from keyflay.core.keyboard.keys import KeyData

    def _make(rows: Sequence[Sequence[object]], **kwargs):
        arrangement = []
        for r, row in enumerate(rows):
            keys = []
            for c, item in enumerate(row):
                if isinstance(item, tuple):
                    width, grow, shrink = item
                else:
                    width, grow, shrink = item, 0.0, 1.0
                keys.append(
                    KeyData(
                        code=0,
                        label=f"r{r}c{c}",
                        width_factor=float(width),
                        grow=float(grow),
                        shrink=float(shrink),
                    )
                )
            arrangement.append(keys)
        return TextKeyboard(arrangement, **kwargs)

    return _make
