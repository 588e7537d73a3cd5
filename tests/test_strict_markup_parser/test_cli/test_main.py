"""Tests for the CLI main module."""

import argparse
import json
from pathlib import Path

import pytest

from strict_markup_parser.cli.main import (
    CLIConfig,
    MarkupProcessor,
    create_argument_parser,
    format_results,
    main,
    render_tree,
)
from strict_markup_parser.tree import Comment, Element, Text


@pytest.fixture
def markup_dir(tmp_path: Path) -> Path:
    (tmp_path / "good.html").write_text('<a x="1">hi<!--c--><b></b></a>', encoding="utf-8")
    (tmp_path / "bad.html").write_text("<a></b>", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("<ignored></ignored>", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "deep.xml").write_text("<d></d>", encoding="utf-8")
    return tmp_path


class TestCLIConfig:
    """Test CLI configuration management."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = CLIConfig()

        assert config.parser_config.root_tag == "html"
        assert config.output_format == "json"
        assert config.encoding == "utf-8"
        assert config.verbose is False
        assert config.quiet is False

    def test_from_args_overrides(self) -> None:
        """Test command-line options override parser configuration."""
        args = create_argument_parser().parse_args(
            ["parse", "x.html", "--root-tag", "doc", "--max-depth", "0", "-f", "tree"]
        )

        config = CLIConfig.from_args(args)

        assert config.parser_config.root_tag == "doc"
        assert config.parser_config.max_depth is None
        assert config.output_format == "tree"

    def test_from_args_with_config_file(self, tmp_path: Path) -> None:
        """Test --config loads a JSON parser configuration."""
        config_path = tmp_path / "parser.json"
        config_path.write_text(json.dumps({"root_tag": "body", "max_depth": 7}))
        args = create_argument_parser().parse_args(
            ["check", "x.html", "--config", str(config_path)]
        )

        config = CLIConfig.from_args(args)

        assert config.parser_config.root_tag == "body"
        assert config.parser_config.max_depth == 7


class TestMarkupProcessor:
    """Test markup processing functionality."""

    def test_process_single_file_success(self, markup_dir: Path) -> None:
        """Test a well-formed file yields its tree and summary."""
        processor = MarkupProcessor(CLIConfig())

        result = processor.process_single_file(markup_dir / "good.html")

        assert result["success"] is True
        assert result["tree"].tag == "a"
        assert result["summary"]["element_count"] == 2

    def test_process_single_file_malformed(self, markup_dir: Path) -> None:
        """Test a malformed file reports the error and its location."""
        processor = MarkupProcessor(CLIConfig())

        result = processor.process_single_file(markup_dir / "bad.html")

        assert result["success"] is False
        assert "does not match" in result["error"]
        assert result["line"] == 1
        assert result["column"] == 6

    def test_process_missing_file(self, tmp_path: Path) -> None:
        """Test an unreadable file is reported, not raised."""
        processor = MarkupProcessor(CLIConfig())

        result = processor.process_single_file(tmp_path / "missing.html")

        assert result["success"] is False
        assert "error" in result

    def test_find_markup_files(self, markup_dir: Path) -> None:
        """Test directory expansion filters by suffix."""
        processor = MarkupProcessor(CLIConfig())

        flat = [p.name for p in processor.find_markup_files(markup_dir)]
        recursive = [p.name for p in processor.find_markup_files(markup_dir, True)]

        assert flat == ["bad.html", "good.html"]
        assert sorted(recursive) == ["bad.html", "deep.xml", "good.html"]


class TestFormatting:
    """Test output formatting."""

    def test_render_tree(self) -> None:
        """Test the debug tree listing."""
        tree = Element("a", {"x": "1"}, (Text("hi"), Comment("c"), Element("b")))

        assert render_tree(tree) == (
            "Element <a x='1'>\n"
            "  Text 'hi'\n"
            "  Comment 'c'\n"
            "  Element <b>"
        )

    def test_format_json_serializes_tree(self) -> None:
        """Test JSON output replaces node objects with dictionaries."""
        results = [{"file": "f.html", "success": True, "summary": {}, "tree": Text("x")}]

        output = json.loads(format_results(results, "json"))

        assert output[0]["tree"] == {"type": "text", "data": "x"}

    def test_format_summary_empty(self) -> None:
        """Test summary output with no results."""
        assert format_results([], "summary") == "No files processed."


class TestMain:
    """Test the CLI entry point."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture) -> None:
        """Test running without a command shows help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_parse_tree_format(self, markup_dir: Path, capsys: pytest.CaptureFixture) -> None:
        """Test parse prints a debug tree for a good file."""
        exit_code = main(["parse", str(markup_dir / "good.html"), "--format", "tree"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Element <a x='1'>" in out
        assert "  Comment 'c'" in out

    def test_parse_json_output_file(self, markup_dir: Path, tmp_path: Path) -> None:
        """Test parse writes JSON results to --output."""
        output = tmp_path / "out.json"

        exit_code = main(["-q", "parse", str(markup_dir / "good.html"), "-o", str(output)])

        data = json.loads(output.read_text(encoding="utf-8"))
        assert exit_code == 0
        assert data[0]["tree"]["tag"] == "a"

    def test_parse_directory_with_failure(
        self, markup_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Test any malformed file makes the exit code non-zero."""
        exit_code = main(["parse", str(markup_dir), "--format", "summary"])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "Parsed 2 files, 1 well formed" in out
        assert "FAIL" in out

    def test_check(self, markup_dir: Path, capsys: pytest.CaptureFixture) -> None:
        """Test check reports each file."""
        exit_code = main(["check", str(markup_dir / "good.html"), str(markup_dir / "bad.html")])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "OK" in out
        assert "FAIL" in out

    def test_check_all_good(self, markup_dir: Path) -> None:
        """Test check succeeds when every file is well formed."""
        assert main(["check", "-r", str(markup_dir / "nested")]) == 0

    def test_check_empty_directory(self, tmp_path: Path) -> None:
        """Test no matching files is a failure."""
        assert main(["check", str(tmp_path)]) == 1

    def test_invalid_configuration(
        self, markup_dir: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Test invalid options exit with status 2."""
        exit_code = main(["check", str(markup_dir), "--root-tag", "bad-tag"])

        assert exit_code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_wrongly_typed_config_file(
        self, markup_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Test a config file with a wrongly typed value exits with status 2."""
        config_path = tmp_path / "parser.json"
        config_path.write_text(json.dumps({"max_depth": "5"}))

        exit_code = main(["check", str(markup_dir / "good.html"), "--config", str(config_path)])

        assert exit_code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_parse_args_namespace(self) -> None:
        """Test argument parser wiring for global options."""
        args = create_argument_parser().parse_args(["-v", "check", "a.html"])

        assert isinstance(args, argparse.Namespace)
        assert args.verbose is True
        assert args.command == "check"
