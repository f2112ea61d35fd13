"""
Configuration validation.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from typing import Any, Dict, Tuple, Union

from ..constants import COLOR_PATTERN
from .logger import get_logger

logger = get_logger(__name__)

ALLOWED_FRAMEWORKS = ('react', 'vue')
ALLOWED_FORMATTERS = ('prettier', 'none')

# Allowed configuration keys and their types
CONFIG_KEYS: Dict[str, Union[type, Tuple[type, ...]]] = {
    'entry': str,
    'output': str,
    'projectName': str,
    'generate': list,
    'color': str,
    'titleSuffix': str,
    'formatter': str,
    'declarations': bool,
    'removeSources': bool,
    'readme': (dict, type(None)),
}

README_KEYS: Dict[str, Union[type, Tuple[type, ...]]] = {
    'output': str,
    'template': (str, type(None)),
    'declarationTag': (str, type(None)),
}


def _check_types(data: Dict[str, Any], allowed: Dict[str, Any], section: str) -> None:
    for key in data.keys():
        if key not in allowed:
            logger.warning(f"Unknown {section} key ignored: {key}")

    for key, expected_type in allowed.items():
        if key in data and not isinstance(data[key], expected_type):
            expected_name = getattr(expected_type, '__name__', str(expected_type))
            raise ValueError(
                f"Invalid type for '{key}': expected {expected_name}, got {type(data[key]).__name__}")


def validate_color(value: str) -> bool:
    """Check that a color is a hex color or a plain CSS color keyword."""
    return bool(re.match(COLOR_PATTERN, value))


def validate_config_json(data: Any) -> bool:
    """
    Validate configuration JSON structure.

    Args:
        data: Parsed JSON data to validate

    Returns:
        True if data is valid

    Raises:
        ValueError: If data structure is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a JSON object")

    _check_types(data, CONFIG_KEYS, "configuration")

    for key in ('entry', 'output'):
        if key in data and not data[key].strip():
            raise ValueError(f"'{key}' must not be empty")

    if 'generate' in data:
        if not data['generate']:
            raise ValueError("'generate' must list at least one framework")
        for framework in data['generate']:
            if framework not in ALLOWED_FRAMEWORKS:
                raise ValueError(
                    f"Unknown framework '{framework}', expected one of {', '.join(ALLOWED_FRAMEWORKS)}")

    if 'formatter' in data and data['formatter'] not in ALLOWED_FORMATTERS:
        raise ValueError(
            f"Unknown formatter '{data['formatter']}', expected one of {', '.join(ALLOWED_FORMATTERS)}")

    if 'color' in data and not validate_color(data['color']):
        raise ValueError(f"Invalid color: {data['color']}")

    readme = data.get('readme')
    if readme is not None:
        _check_types(readme, README_KEYS, "readme")
        if not readme.get('output'):
            raise ValueError("'readme.output' is required when 'readme' is set")
        if readme.get('declarationTag') == '':
            raise ValueError("'readme.declarationTag' must not be empty")

    return True
