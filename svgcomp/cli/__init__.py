"""
Command-line interface for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later
