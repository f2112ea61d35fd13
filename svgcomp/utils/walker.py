"""
Two-level discovery of icon folders.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
from pathlib import Path
from typing import List, Union

from ..constants import ROOT_FOLDER, SVG_EXTENSION
from ..exceptions import StructuralConflictError
from .logger import get_logger

logger = get_logger(__name__)


def list_directory(path: Union[str, Path]) -> List[str]:
    """
    List directory entries in listing order (byte-wise sorted names).

    Args:
        path: Directory to list

    Returns:
        Entry names
    """
    return sorted(os.listdir(path))


def discover_folders(entry: Union[str, Path]) -> List[str]:
    """
    Find the entry root and its immediate subdirectories.

    Args:
        entry: Entry folder

    Returns:
        Folder names relative to entry, the root being "."
    """
    entry = Path(entry)
    folders = [ROOT_FOLDER]
    folders.extend(name for name in list_directory(entry) if (entry / name).is_dir())
    logger.debug(f"Discovered {len(folders)} folders in {entry}")
    return folders


def list_svg_files(folder: Union[str, Path]) -> List[str]:
    """List the .svg files directly inside a folder."""
    folder = Path(folder)
    return [
        name for name in list_directory(folder)
        if name.endswith(SVG_EXTENSION) and (folder / name).is_file()
    ]


def check_structure(entry: Union[str, Path], output: Union[str, Path], folders: List[str]) -> None:
    """
    Make sure mirroring folders into the output cannot copy the entry into itself.

    Args:
        entry: Entry folder
        output: Output folder
        folders: Discovered folders relative to entry

    Raises:
        StructuralConflictError: If the output root is the entry root, a
            discovered folder is the output root, or a mirrored output folder
            is the entry root
    """
    entry_abs = Path(entry).resolve()
    output_abs = Path(output).resolve()

    for folder in folders:
        source_abs = (entry_abs / folder).resolve()
        mirror_abs = (output_abs / folder).resolve()

        if mirror_abs == entry_abs or source_abs == output_abs:
            conflict = mirror_abs if mirror_abs == entry_abs else source_abs
            raise StructuralConflictError(
                f'Folder "{conflict}" can\'t be the same as the entry folder',
                folder=folder,
                entry=str(entry),
            )
