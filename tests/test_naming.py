"""
Tests for identifier casing helpers.
"""

import pytest

from svgcomp.utils.naming import camel_case, capitalize, component_name, pascal_case


@pytest.mark.parametrize("stem,expected", [
    ("arrow-left", "ArrowLeft"),
    ("arrow_left", "ArrowLeft"),
    ("arrowLeft", "ArrowLeft"),
    ("home filled", "HomeFilled"),
    ("XMLHttp", "XmlHttp"),
    ("icon2x", "Icon2X"),
    ("chevron.down", "ChevronDown"),
])
def test_component_name(stem, expected):
    """File stems become PascalCase identifiers."""
    assert component_name(stem) == expected


def test_component_name_leading_digit():
    """Names that would start with a digit get a prefix."""
    assert component_name("2fa-lock") == "Icon2FaLock"
    assert component_name("---") == "Icon"


@pytest.mark.parametrize("name,expected", [
    ("stroke-width", "strokeWidth"),
    ("viewBox", "viewBox"),
    ("xlink:href", "xlinkHref"),
    ("xml:space", "xmlSpace"),
    ("x1", "x1"),
    ("d", "d"),
])
def test_camel_case(name, expected):
    """Attribute names follow the JSX camelCase convention."""
    assert camel_case(name) == expected


def test_pascal_and_capitalize():
    assert pascal_case("brand-icons") == "BrandIcons"
    assert capitalize("brand") == "Brand"
    assert capitalize("") == ""
