from __future__ import annotations

import logging
import os


def configure_logging() -> None:
    """Configure root logging for the CLI.

    Existing handlers (embedding hosts, pytest) are left alone.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if os.environ.get("KEYFLAY_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
