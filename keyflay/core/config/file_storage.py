from __future__ import annotations

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Any


def load_config_settings(
    *,
    config_file: Path,
    defaults: dict[str, Any],
    retries: int = 3,
    retry_delay: float = 0.02,
    logger,
) -> dict[str, Any] | None:
    """Load config JSON, retrying transient partial writes.

    Returns `{**defaults, **loaded}` on success, a copy of `defaults` when the
    file does not exist, and None when loading keeps failing.
    """

    if not config_file.exists():
        return dict(defaults)

    last_error: Exception | None = None
    for _ in range(max(1, retries)):
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                logger.warning("Ignoring config %s: top-level value is not an object", config_file)
                loaded = {}
            return {**defaults, **loaded}
        except json.JSONDecodeError as e:
            # A writer may have truncated the file right before rewriting it.
            last_error = e
            time.sleep(retry_delay)
        except OSError as e:
            last_error = e
            break

    logger.warning("Failed to load config %s: %s", config_file, last_error)
    return None


def save_config_settings_atomic(*, config_dir: Path, config_file: Path, settings: dict[str, Any], logger) -> None:
    """Write config JSON to a temp file, then replace the target."""

    try:
        config_dir.mkdir(parents=True, exist_ok=True)

        tmp_fd, tmp_path = tempfile.mkstemp(prefix="config.", suffix=".tmp", dir=str(config_dir))
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=2, sort_keys=True)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, config_file)
        finally:
            if os.path.exists(tmp_path):
                try:
                    os.unlink(tmp_path)
                except OSError as exc:
                    logger.debug("Failed to remove temp config file %s: %s", tmp_path, exc)

    except OSError as e:
        logger.warning("Failed to save config %s: %s", config_file, e)
