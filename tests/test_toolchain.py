"""
Tests for the prettier and tsc wrappers.
"""

import subprocess
import unittest
from pathlib import Path
from unittest.mock import patch

import pytest

from svgcomp.exceptions import FormatterError, ToolchainError
from svgcomp.toolchain import DeclarationCompiler, SourceFormatter
from svgcomp.utils.subprocess_wrapper import SecureSubprocess


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestSourceFormatter(unittest.TestCase):
    """Test source formatting."""

    def test_disabled(self):
        formatter = SourceFormatter("none")
        with patch.object(SecureSubprocess, 'find_command') as find:
            self.assertEqual(formatter.format("const a=1", "index.tsx"), "const a=1")
            find.assert_not_called()

    @patch.object(SecureSubprocess, 'run')
    @patch.object(SecureSubprocess, 'find_command', return_value=None)
    def test_prettier_missing(self, mock_find, mock_run):
        """Sources pass through unformatted when prettier is not installed."""
        formatter = SourceFormatter("prettier")
        self.assertEqual(formatter.format("a", "index.tsx"), "a")
        self.assertEqual(formatter.format("b", "index.vue"), "b")
        mock_run.assert_not_called()

    @patch.object(SecureSubprocess, 'run', return_value=completed(stdout="const a = 1;\n"))
    @patch.object(SecureSubprocess, 'find_command', return_value="/bin/prettier")
    def test_formatted(self, mock_find, mock_run):
        formatter = SourceFormatter("prettier", project_dir="/proj")

        self.assertEqual(formatter.format("const a=1", "/proj/dist/A/index.tsx"), "const a = 1;\n")

        cmd = mock_run.call_args[0][0]
        self.assertEqual(cmd[:3], ["/bin/prettier", "--stdin-filepath", "/proj/dist/A/index.tsx"])
        self.assertEqual(mock_run.call_args[1]["input"], "const a=1")

    @patch.object(SecureSubprocess, 'run', return_value=completed(stderr="SyntaxError: Unexpected token", returncode=2))
    @patch.object(SecureSubprocess, 'find_command', return_value="/bin/prettier")
    def test_prettier_error(self, mock_find, mock_run):
        with self.assertRaises(FormatterError) as ctx:
            SourceFormatter().format("<<", "index.tsx")
        self.assertIn("SyntaxError", str(ctx.exception))

    @patch.object(SecureSubprocess, 'run', side_effect=ToolchainError("prettier timed out after 60s"))
    @patch.object(SecureSubprocess, 'find_command', return_value="/bin/prettier")
    def test_prettier_timeout(self, mock_find, mock_run):
        with self.assertRaises(FormatterError):
            SourceFormatter().format("a", "index.tsx")


class TestDeclarationCompiler:
    """Test declaration output."""

    def test_no_index_files(self):
        with patch.object(SecureSubprocess, 'find_command') as find:
            result = DeclarationCompiler().compile([])
        assert result.skipped
        find.assert_not_called()

    def test_tsc_missing(self, tmp_path):
        with patch.object(SecureSubprocess, 'find_command', return_value=None):
            result = DeclarationCompiler(tmp_path).compile([tmp_path / "dist" / "index.ts"])
        assert result.skipped
        assert result.emitted_files == []

    def test_emitted_files_and_diagnostics(self, tmp_path):
        stdout = (
            "TSFILE: dist/A/index.js\n"
            "TSFILE: dist/A/index.d.ts\n"
            "dist/index.ts(1,1): error TS2307: Cannot find module 'react'.\n"
        )
        with patch.object(SecureSubprocess, 'find_command', return_value="/bin/tsc"), \
                patch.object(SecureSubprocess, 'run', return_value=completed(stdout=stdout, returncode=2)) as run:
            result = DeclarationCompiler(tmp_path).compile([tmp_path / "dist" / "index.ts"])

        cmd = run.call_args[0][0]
        assert cmd[0] == "/bin/tsc"
        assert "--declaration" in cmd
        assert cmd[-1] == str(tmp_path / "dist" / "index.ts")
        assert result.emitted_files == [tmp_path / "dist" / "A" / "index.js",
                                        tmp_path / "dist" / "A" / "index.d.ts"]
        assert result.diagnostics == ["dist/index.ts(1,1): error TS2307: Cannot find module 'react'."]
        assert not result.skipped

    def test_compiler_crash_is_a_diagnostic(self, tmp_path):
        with patch.object(SecureSubprocess, 'find_command', return_value="/bin/tsc"), \
                patch.object(SecureSubprocess, 'run', side_effect=ToolchainError("tsc timed out")):
            result = DeclarationCompiler(tmp_path).compile([tmp_path / "index.ts"])
        assert result.diagnostics == ["tsc timed out"]

    def test_remove_sources(self, tmp_path):
        component = tmp_path / "dist" / "A"
        component.mkdir(parents=True)
        (component / "index.tsx").write_text("tsx")
        (component / "index.js").write_text("js")
        (tmp_path / "dist" / "index.ts").write_text("ts")
        (tmp_path / "dist" / "index.js").write_text("js")

        stdout = f"TSFILE: {component / 'index.js'}\nTSFILE: {tmp_path / 'dist' / 'index.js'}\n"
        with patch.object(SecureSubprocess, 'find_command', return_value="/bin/tsc"), \
                patch.object(SecureSubprocess, 'run', return_value=completed(stdout=stdout)):
            result = DeclarationCompiler(tmp_path, remove_sources=True).compile([tmp_path / "dist" / "index.ts"])

        assert not (component / "index.tsx").exists()
        assert not (tmp_path / "dist" / "index.ts").exists()
        assert (component / "index.js").exists()
        assert result.removed_sources == [component / "index.tsx", tmp_path / "dist" / "index.ts"]


class TestSecureSubprocess:
    """Test tool lookup."""

    def test_local_bin_preferred(self, tmp_path):
        bin_dir = tmp_path / "node_modules" / ".bin"
        bin_dir.mkdir(parents=True)
        tool = bin_dir / "prettier"
        tool.write_text("#!/bin/sh\n")
        tool.chmod(0o755)

        assert SecureSubprocess.find_command("prettier", tmp_path) == str(tool.resolve())

    def test_path_fallback(self, tmp_path):
        with patch("svgcomp.utils.subprocess_wrapper.shutil.which", return_value=None) as which:
            assert SecureSubprocess.find_command("tsc", tmp_path) is None
        which.assert_called_once_with("tsc")

    def test_unknown_command(self):
        with pytest.raises(ValueError):
            SecureSubprocess.find_command("rm")

    def test_missing_executable(self, tmp_path):
        with pytest.raises(ToolchainError):
            SecureSubprocess.run([str(tmp_path / "missing-tool")])
