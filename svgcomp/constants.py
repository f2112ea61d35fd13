"""
Application constants for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

# Application info
APP_NAME = "SVG Components Builder"
APP_VERSION = "1.0.0"

# Configuration
CONFIG_FILE_NAME = "build.config.json"
PACKAGE_JSON_NAME = "package.json"
MAX_CONFIG_FILE_SIZE = 1024 * 1024  # 1MB

# Default values
DEFAULT_ENTRY = "./src"
DEFAULT_OUTPUT = "./dist"
DEFAULT_GENERATE = ["react"]
DEFAULT_COLOR = "#262626"
DEFAULT_TITLE_SUFFIX = " icon"
DEFAULT_DECLARATION_TAG = "[icons-declaration]"
DEFAULT_FORMATTER = "prettier"

# Walker
ROOT_FOLDER = "."
SVG_EXTENSION = ".svg"
INDEX_FILE_NAME = "index.ts"
COMPONENT_FILE_STEM = "index"

# Formatter settings passed to prettier
PRETTIER_OPTIONS = [
    "--single-quote",
    "--trailing-comma", "all",
    "--print-width", "100",
    "--tab-width", "2",
]

# TypeScript compiler settings for the declaration step
TSC_OPTIONS = [
    "--declaration",
    "--allowSyntheticDefaultImports",
    "--jsx", "react-jsx",
    "--module", "commonjs",
    "--target", "es5",
    "--listEmittedFiles",
    "--pretty", "false",
]

# Local tool directory searched before PATH
NODE_BIN_DIR = "node_modules/.bin"

# External tool timeouts (seconds)
FORMATTER_TIMEOUT = 60
COMPILER_TIMEOUT = 600

# Report worker pool
REPORT_MAX_WORKERS = 8

# Color validation (hex or CSS color keyword)
COLOR_PATTERN = r'^(#[0-9a-fA-F]{3,8}|[a-zA-Z]+)$'

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_CONFIG = 3
EXIT_CONFLICT = 4
EXIT_INTERRUPTED = 130
