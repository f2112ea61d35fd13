"""
Summary report of generated files.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .constants import REPORT_MAX_WORKERS
from .models import GeneratedFile, ReportRow
from .utils.logger import get_logger

logger = get_logger(__name__)


def _file_size(generated: GeneratedFile) -> int:
    try:
        return os.path.getsize(generated.file)
    except OSError as e:
        logger.warning(f"Could not stat {generated.file}: {e}")
        return 0


def build_report(generated_files: Sequence[GeneratedFile],
                 max_workers: Optional[int] = None) -> List[ReportRow]:
    """
    Collect name, path and size of every generated file.

    File sizes are read concurrently; rows keep the order of generated_files.

    Args:
        generated_files: Files in generation order
        max_workers: Size of the worker pool

    Returns:
        One ReportRow per file
    """
    if not generated_files:
        return []

    workers = max_workers or min(REPORT_MAX_WORKERS, len(generated_files))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ReportWorker") as executor:
        sizes = list(executor.map(_file_size, generated_files))

    return [
        ReportRow(index=index, name=generated.name, file=generated.file, size=size)
        for index, (generated, size) in enumerate(zip(generated_files, sizes))
    ]
