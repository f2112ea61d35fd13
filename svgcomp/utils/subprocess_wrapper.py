"""
Subprocess wrapper for the Node toolchain (prettier, tsc).
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..constants import NODE_BIN_DIR
from ..exceptions import ToolchainError
from .logger import get_logger

logger = get_logger(__name__)


class SecureSubprocess:
    """Wrapper around subprocess that resolves tools and never uses a shell."""

    # Tools the builder knows how to call
    ALLOWED_COMMANDS: Tuple[str, ...] = ('prettier', 'tsc')

    _command_path_cache: Dict[str, Optional[str]] = {}
    _cache_lock = threading.Lock()

    @classmethod
    def find_command(cls, command: str, cwd: Optional[Union[str, Path]] = None) -> Optional[str]:
        """
        Locate a tool in ./node_modules/.bin, then on PATH.

        Args:
            command: Tool name
            cwd: Project directory holding node_modules

        Returns:
            Absolute path to the executable, or None when not installed
        """
        if command not in cls.ALLOWED_COMMANDS:
            raise ValueError(f"Command '{command}' not in allowed list")

        base = Path(cwd) if cwd else Path.cwd()
        cache_key = f"{base.resolve()}:{command}"

        with cls._cache_lock:
            if cache_key in cls._command_path_cache:
                return cls._command_path_cache[cache_key]

            path: Optional[str] = None
            local = base / NODE_BIN_DIR / command
            if local.is_file() and os.access(local, os.X_OK):
                path = str(local.resolve())
            else:
                path = shutil.which(command)

            if path:
                logger.debug(f"Resolved {command} to {path}")
            else:
                logger.debug(f"{command} not found in {NODE_BIN_DIR} or PATH")

            cls._command_path_cache[cache_key] = path
            return path

    @classmethod
    def clear_cache(cls) -> None:
        """Forget resolved tool paths."""
        with cls._cache_lock:
            cls._command_path_cache.clear()

    @classmethod
    def run(
        cls,
        cmd: Union[List[str], str],
        input: Optional[str] = None,
        timeout: Optional[int] = None,
        cwd: Optional[Union[str, Path]] = None,
    ) -> subprocess.CompletedProcess:
        """
        Run a command with captured text output.

        Args:
            cmd: Command and arguments
            input: Text fed to stdin
            timeout: Timeout in seconds
            cwd: Working directory

        Returns:
            CompletedProcess instance

        Raises:
            ToolchainError: If the command cannot be started or times out
        """
        if isinstance(cmd, str):
            cmd = shlex.split(cmd)
        if not cmd:
            raise ValueError("Empty command")

        logger.debug(f"Running command: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                input=input,
                capture_output=True,
                text=True,
                timeout=timeout,
                cwd=str(cwd) if cwd else None,
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"Command timed out after {timeout}s: {cmd[0]}")
            raise ToolchainError(f"{Path(cmd[0]).name} timed out after {timeout}s") from e
        except OSError as e:
            logger.error(f"Failed to start {cmd[0]}: {e}")
            raise ToolchainError(f"Failed to start {Path(cmd[0]).name}: {e}") from e

        if result.returncode != 0:
            logger.debug(f"Command returned non-zero: {result.returncode}")

        return result
