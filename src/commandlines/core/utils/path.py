"""Command line string to filesystem path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def make_path_from(pathstring: str | os.PathLike[str]) -> Path:
    """Return a Path for a command line string. The path is not resolved and
    need not exist."""
    return Path(pathstring)
