"""`python -m keyflay` entrypoint.

For installed usage, prefer the `keyflay` console script.
"""

from __future__ import annotations

from keyflay.cli.entrypoint import main


if __name__ == "__main__":
    raise SystemExit(main())
