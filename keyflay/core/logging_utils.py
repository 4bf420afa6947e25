from __future__ import annotations

import logging
import threading
import time


_last_emitted: dict[str, float] = {}
_lock = threading.Lock()


def log_throttled(
    logger: logging.Logger,
    key: str,
    *,
    interval_s: float,
    level: int,
    msg: str,
    exc: BaseException | None = None,
) -> bool:
    """Emit *msg* at most once per *interval_s* seconds for a given *key*.

    Layout passes run on every container resize, so per-row warnings would
    otherwise repeat for each frame of a resize drag.

    Returns True if the message was emitted.
    """

    now = time.monotonic()
    with _lock:
        last = _last_emitted.get(key)
        if last is not None and (now - last) < interval_s:
            return False
        _last_emitted[key] = now

    logger.log(level, msg, exc_info=exc)
    return True


def reset_throttle(key: str | None = None) -> None:
    """Forget throttle state for *key*, or for every key when None."""

    with _lock:
        if key is None:
            _last_emitted.clear()
        else:
            _last_emitted.pop(key, None)
