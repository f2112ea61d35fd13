"""
Tests for the generated files report.
"""

from svgcomp.models import GeneratedFile
from svgcomp.report import build_report


def test_rows_keep_generation_order(tmp_path):
    files = []
    for index, name in enumerate(["Zoom", "Add", "Home", "Menu", "Close"]):
        path = tmp_path / f"{name}.tsx"
        path.write_text("x" * (index + 1) * 100)
        files.append(GeneratedFile(name=name, file=path))

    rows = build_report(files, max_workers=3)

    assert [row.name for row in rows] == ["Zoom", "Add", "Home", "Menu", "Close"]
    assert [row.index for row in rows] == [0, 1, 2, 3, 4]
    assert [row.size for row in rows] == [100, 200, 300, 400, 500]


def test_missing_file_has_zero_size(tmp_path):
    rows = build_report([GeneratedFile(name="Gone", file=tmp_path / "gone.tsx")])
    assert rows[0].size == 0
    assert rows[0].size_kb == "0kb"


def test_empty():
    assert build_report([]) == []
