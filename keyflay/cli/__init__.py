from .bootstrap import configure_logging
from .entrypoint import main

__all__ = ["configure_logging", "main"]
