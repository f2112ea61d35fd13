"""
File helpers for generated output.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
import tempfile
from pathlib import Path
from typing import Union


def read_file(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_file(path: Union[str, Path], content: str) -> Path:
    """
    Write a UTF-8 text file atomically.

    The content goes to a temporary file in the same directory which then
    replaces the target, so a failed write never leaves a partial file.

    Args:
        path: Target file
        content: Text to write

    Returns:
        The target path
    """
    path = Path(path)
    fd, temp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
    return path
