"""
External toolchain collaborators: source formatting and declaration output.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .constants import COMPILER_TIMEOUT, FORMATTER_TIMEOUT, PRETTIER_OPTIONS, TSC_OPTIONS
from .exceptions import FormatterError, ToolchainError
from .models import DeclarationResult
from .utils.logger import get_logger
from .utils.subprocess_wrapper import SecureSubprocess

logger = get_logger(__name__)

EMITTED_FILE_PREFIX = "TSFILE:"
SOURCE_SUFFIXES = (".ts", ".tsx")


class SourceFormatter:
    """Formats generated source with prettier."""

    def __init__(self, formatter: str = "prettier", project_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize the formatter.

        Args:
            formatter: "prettier" or "none"
            project_dir: Directory whose node_modules/.bin is searched first
        """
        self.formatter = formatter
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self._warned_missing = False

    @property
    def enabled(self) -> bool:
        return self.formatter != "none"

    def format(self, source: str, file_path: Union[str, Path]) -> str:
        """
        Format source code for the given file type.

        Args:
            source: Source text
            file_path: Target file, used by prettier to pick a parser

        Returns:
            Formatted source (unchanged when formatting is disabled or
            prettier is not installed)

        Raises:
            FormatterError: If prettier rejects the source
        """
        if not self.enabled:
            return source

        prettier = SecureSubprocess.find_command("prettier", self.project_dir)
        if not prettier:
            if not self._warned_missing:
                logger.warning("prettier not found, writing unformatted sources")
                self._warned_missing = True
            return source

        cmd = [prettier, "--stdin-filepath", str(file_path), *PRETTIER_OPTIONS]
        try:
            result = SecureSubprocess.run(cmd, input=source, timeout=FORMATTER_TIMEOUT,
                                          cwd=self.project_dir)
        except ToolchainError as e:
            raise FormatterError(str(e)) from e

        if result.returncode != 0:
            message = (result.stderr or result.stdout).strip().splitlines()
            raise FormatterError(f"prettier failed for {file_path}: {message[0] if message else 'unknown error'}")

        return result.stdout


class DeclarationCompiler:
    """Runs tsc over the generated barrel files to emit JS and declarations."""

    def __init__(self, project_dir: Optional[Union[str, Path]] = None, remove_sources: bool = False) -> None:
        """
        Initialize the compiler.

        Args:
            project_dir: Directory whose node_modules/.bin is searched first
            remove_sources: Delete .ts/.tsx sources that were emitted as .js
        """
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.remove_sources = remove_sources

    def compile(self, index_files: Sequence[Union[str, Path]]) -> DeclarationResult:
        """
        Compile all barrel files as one program.

        Diagnostics are collected and logged, never raised.

        Args:
            index_files: Barrel index files of every folder

        Returns:
            DeclarationResult with emitted files and diagnostics
        """
        result = DeclarationResult()
        if not index_files:
            result.skipped = True
            return result

        tsc = SecureSubprocess.find_command("tsc", self.project_dir)
        if not tsc:
            logger.warning("tsc not found, skipping declaration output")
            result.skipped = True
            return result

        cmd = [tsc, *TSC_OPTIONS, *[str(f) for f in index_files]]
        try:
            completed = SecureSubprocess.run(cmd, timeout=COMPILER_TIMEOUT, cwd=self.project_dir)
        except ToolchainError as e:
            logger.error(f"Declaration step failed: {e}")
            result.diagnostics.append(str(e))
            return result

        self._parse_output(completed.stdout, result)
        for line in (completed.stderr or "").splitlines():
            if line.strip():
                result.diagnostics.append(line.strip())

        for diagnostic in result.diagnostics:
            logger.info(f"tsc: {diagnostic}")

        if self.remove_sources:
            result.removed_sources = self._remove_sources(result.emitted_files)

        logger.info(f"Emitted {len(result.emitted_files)} files from {len(index_files)} index files")
        return result

    def _parse_output(self, stdout: str, result: DeclarationResult) -> None:
        for line in (stdout or "").splitlines():
            line = line.strip()
            if not line:
                continue
            if line.startswith(EMITTED_FILE_PREFIX):
                emitted = Path(line[len(EMITTED_FILE_PREFIX):].strip())
                if not emitted.is_absolute():
                    emitted = self.project_dir / emitted
                result.emitted_files.append(emitted)
            else:
                result.diagnostics.append(line)

    def _remove_sources(self, emitted_files: List[Path]) -> List[Path]:
        removed = []
        for emitted in emitted_files:
            if emitted.suffix != ".js":
                continue
            for suffix in SOURCE_SUFFIXES:
                source = emitted.with_suffix(suffix)
                if source.is_file():
                    try:
                        source.unlink()
                        removed.append(source)
                    except OSError as e:
                        logger.warning(f"Could not remove {source}: {e}")
        return removed
