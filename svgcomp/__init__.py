"""
SVG Components Builder

Turns a folder of SVG icons into typed React and Vue icon components with a
barrel index per folder, and documents the icon set in a README table.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

__version__ = "1.0.0"
__author__ = "NeatCode Labs"
__email__ = "neatcodelabs@gmail.com"
