"""
Output formatting utilities for the CLI.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import json
import sys
from typing import Any, List, Sequence

from colorama import init, Fore, Style

from ..models import ReportRow

# Initialize colorama for cross-platform color support
init(autoreset=True)


class OutputFormatter:
    """Handles output formatting for the CLI."""

    def __init__(self, use_color: bool = True, quiet: bool = False):
        """
        Initialize output formatter.

        Args:
            use_color: Whether to use ANSI colors
            quiet: Whether to suppress everything but errors
        """
        self.use_color = use_color
        self.quiet = quiet

        # Color shortcuts
        self.green = Fore.GREEN if use_color else ''
        self.yellow = Fore.YELLOW if use_color else ''
        self.red = Fore.RED if use_color else ''
        self.cyan = Fore.CYAN if use_color else ''
        self.white = Fore.WHITE if use_color else ''
        self.reset = Style.RESET_ALL if use_color else ''
        self.bright = Style.BRIGHT if use_color else ''

    def success(self, message: str) -> None:
        """Print success message."""
        if not self.quiet:
            print(f"{self.green}✅ {message}{self.reset}")

    def warning(self, message: str) -> None:
        """Print warning message."""
        if not self.quiet:
            print(f"{self.yellow}⚠️  {message}{self.reset}")

    def error(self, message: str) -> None:
        """Print error message."""
        print(f"{self.red}❌ {message}{self.reset}", file=sys.stderr)

    def info(self, message: str) -> None:
        """Print info message."""
        if not self.quiet:
            print(f"{self.cyan}ℹ️  {message}{self.reset}")

    def header(self, message: str) -> None:
        """Print header message."""
        if not self.quiet:
            print(f"\n{self.cyan}{self.bright}{message}{self.reset}")
            print(f"{self.cyan}{'─' * len(message)}{self.reset}")

    def format_report_table(self, rows: Sequence[ReportRow]) -> str:
        """
        Format generated files as a table.

        Args:
            rows: Report rows

        Returns:
            Formatted table string
        """
        if not rows:
            return "No files generated"

        headers = ['Index', 'Name', 'Path', 'Size']
        cells: List[List[str]] = [
            [str(row.index), row.name, str(row.file), row.size_kb] for row in rows
        ]
        widths = [
            max(len(headers[i]), *(len(cell[i]) for cell in cells))
            for i in range(len(headers))
        ]

        lines = []

        # Header
        header = "  ".join(f"{title:<{widths[i]}}" for i, title in enumerate(headers))
        if self.use_color:
            lines.append(f"  {self.yellow}{header}{self.reset}")
        else:
            lines.append(f"  {header}")
        lines.append("  " + "  ".join('─' * width for width in widths))

        # Rows
        for cell in cells:
            index, name, path, size = (f"{value:<{widths[i]}}" for i, value in enumerate(cell))
            if self.use_color:
                lines.append(f"  {index}  {self.white}{name}{self.reset}  {path}  {self.green}{size}{self.reset}")
            else:
                lines.append(f"  {index}  {name}  {path}  {size}")

        return '\n'.join(lines)

    def report(self, rows: Sequence[ReportRow]) -> None:
        """Print the summary of generated files."""
        if self.quiet:
            return
        print(f"Generated {len(rows)} files successfully:")
        print(self.format_report_table(rows))

    def output_json(self, data: Any) -> None:
        """
        Output data as JSON.

        Args:
            data: Data to output
        """
        print(json.dumps(data, indent=2, default=str))
