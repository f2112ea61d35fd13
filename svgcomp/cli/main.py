"""
Main entry point for the svgcomp command-line tool.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
import logging
import sys
from typing import List, Optional

from .. import __version__
from ..builder import ComponentBuilder
from ..config import Config
from ..constants import (
    EXIT_CONFIG, EXIT_CONFLICT, EXIT_ERROR, EXIT_INTERRUPTED, EXIT_OK, EXIT_USAGE
)
from ..exceptions import ConfigurationError, StructuralConflictError
from ..readme import ReadmeGenerator
from ..report import build_report
from ..utils.logger import configure_logging
from .output import OutputFormatter

MODES = ('build', 'readme')


class SvgCompCLI:
    """Main CLI application class."""

    def __init__(self, config_path: Optional[str] = None, working_dir: Optional[str] = None):
        """Initialize CLI with configuration."""
        self.config_path = config_path
        self.working_dir = working_dir
        self.formatter: Optional[OutputFormatter] = None

    def run(self, args: argparse.Namespace) -> int:
        """
        Run the CLI with given arguments.

        Args:
            args: Parsed command line arguments

        Returns:
            Exit code
        """
        self.formatter = OutputFormatter(
            use_color=not args.no_color,
            quiet=args.quiet or args.json
        )

        mode = args.mode or 'build'
        if mode not in MODES:
            self.formatter.error(f"Unknown mode: {mode}")
            return EXIT_USAGE

        try:
            config = Config(self.config_path, working_dir=self.working_dir)
            if mode == 'build':
                return self.cmd_build(config, args)
            return self.cmd_readme(config, args)
        except ConfigurationError as e:
            self.formatter.error(str(e))
            return EXIT_CONFIG
        except StructuralConflictError as e:
            self.formatter.error(f"Error! {e}")
            return EXIT_CONFLICT

    def cmd_build(self, config: Config, args: argparse.Namespace) -> int:
        """Handle 'build' mode - generate components and barrel files."""
        builder = ComponentBuilder(config)
        result = builder.build()

        declarations = result.declarations
        if declarations and declarations.diagnostics:
            self.formatter.header("TypeScript diagnostics")
            for diagnostic in declarations.diagnostics:
                self.formatter.info(diagnostic)

        self.formatter.report(build_report(result.generated_files))

        for failure in result.failures:
            self.formatter.error(f"Failed: {failure}")

        if args.json:
            self.formatter.output_json(result.to_dict())

        return EXIT_OK if result.success else EXIT_ERROR

    def cmd_readme(self, config: Config, args: argparse.Namespace) -> int:
        """Handle 'readme' mode - write the icon table readme."""
        generated = ReadmeGenerator(config).generate()
        self.formatter.report(build_report([generated]))

        if args.json:
            self.formatter.output_json({"readme": str(generated.file)})

        return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='svgcomp',
        description='Generate React/Vue icon components from a folder of SVG files',
        epilog='Modes:\n'
        '  build    Generate components, barrel files and declarations (default)\n'
        '  readme   Write a markdown table documenting the icons',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'mode',
        nargs='?',
        default=None,
        help='build (default) or readme'
    )

    # Global options
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Alternative config file path (default: ./build.config.json)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output the result as JSON'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable ANSI colors'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Minimal output (errors and exit status only)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Set up logging levels based on CLI arguments
    if args.debug:
        configure_logging(logging.DEBUG, use_color=not args.no_color)
    elif args.quiet or args.json:
        configure_logging(logging.ERROR, use_color=not args.no_color)
    else:
        configure_logging(logging.INFO, use_color=not args.no_color)

    try:
        cli = SvgCompCLI(args.config)
        exit_code = cli.run(args)
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        print(f"Fatal error: {str(e)}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(EXIT_ERROR)


if __name__ == '__main__':
    main()
