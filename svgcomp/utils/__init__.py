"""
Utility modules for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from .files import read_file, write_file
from .logger import configure_logging, get_logger
from .naming import camel_case, capitalize, component_name, pascal_case
from .subprocess_wrapper import SecureSubprocess
from .validators import validate_color, validate_config_json
from .walker import check_structure, discover_folders, list_svg_files

__all__ = [
    'read_file',
    'write_file',
    'configure_logging',
    'get_logger',
    'camel_case',
    'capitalize',
    'component_name',
    'pascal_case',
    'SecureSubprocess',
    'validate_color',
    'validate_config_json',
    'check_structure',
    'discover_folders',
    'list_svg_files',
]
