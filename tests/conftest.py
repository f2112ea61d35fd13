"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest

from svgcomp.utils.subprocess_wrapper import SecureSubprocess


ARROW_LEFT_SVG = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">'
    '<path stroke-width="2" stroke-linecap="round" d="M12 19l-7-7 7-7"/></svg>\n'
)

LOGO_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">'
    '<path fill="#000" d="M0 0h16v16H0z"/><path d="M4 4h8v8H4z"/></svg>'
)

CIRCLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    '<circle cx="5" cy="5" r="4"/></svg>'
)


def write_config(working_dir: Path, **overrides) -> Path:
    """Write a build.config.json that needs no Node tooling."""
    data = {
        "entry": "./src",
        "output": "./dist",
        "formatter": "none",
        "declarations": False,
    }
    data.update(overrides)
    config_file = working_dir / "build.config.json"
    config_file.write_text(json.dumps(data), encoding="utf-8")
    return config_file


@pytest.fixture(autouse=True)
def clear_command_cache():
    """Tool lookups must not leak between tests."""
    SecureSubprocess.clear_cache()
    yield
    SecureSubprocess.clear_cache()


@pytest.fixture
def project(tmp_path):
    """A project with src/arrow-left.svg and src/brand/logo.svg."""
    src = tmp_path / "src"
    (src / "brand").mkdir(parents=True)
    (src / "arrow-left.svg").write_text(ARROW_LEFT_SVG, encoding="utf-8")
    (src / "brand" / "logo.svg").write_text(LOGO_SVG, encoding="utf-8")
    write_config(tmp_path)
    return tmp_path


def snapshot(folder: Path) -> dict:
    """Map every file under folder to its bytes."""
    return {
        str(path.relative_to(folder)): path.read_bytes()
        for path in sorted(folder.rglob("*"))
        if path.is_file()
    }
