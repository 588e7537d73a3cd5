"""Main CLI entry point for the strict-markup command-line tool.

Reads markup files, parses them and prints the resulting trees or a
per-file well-formedness report.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from strict_markup_parser import __version__
from strict_markup_parser.api import StrictMarkupParser, to_dict
from strict_markup_parser.shared import (
    ConfigError,
    MalformedMarkupError,
    ParserConfig,
    configure_logging,
    get_logger,
)
from strict_markup_parser.tree import Node, NodeKind, node_kind

MARKUP_SUFFIXES = {".html", ".htm", ".xml"}
TREE_INDENT = "  "


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.parser_config = ParserConfig()
        self.output_format = "json"
        self.encoding = "utf-8"
        self.verbose = False
        self.quiet = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CLIConfig":
        """Build CLI configuration from parsed arguments.

        Command-line options override values loaded from ``--config``.
        """
        config = cls()
        if getattr(args, "config", None):
            config.parser_config = ParserConfig.from_file(args.config)

        overrides: Dict[str, Any] = {}
        if getattr(args, "root_tag", None):
            overrides["root_tag"] = args.root_tag
        if getattr(args, "max_depth", None) is not None:
            overrides["max_depth"] = args.max_depth or None
        if overrides:
            config.parser_config = config.parser_config.override(**overrides)

        config.output_format = getattr(args, "format", config.output_format)
        config.encoding = getattr(args, "encoding", config.encoding)
        config.verbose = getattr(args, "verbose", False)
        config.quiet = getattr(args, "quiet", False)
        return config


class MarkupProcessor:
    """Core markup processing logic for CLI operations."""

    def __init__(self, config: CLIConfig) -> None:
        self.config = config
        self.parser = StrictMarkupParser(config.parser_config)
        self.logger = get_logger(__name__, None, "cli_processor")

    def process_single_file(self, file_path: Path) -> Dict[str, Any]:
        """Parse a single file and return a JSON-ready result."""
        try:
            result = self.parser.parse_document(
                file_path.read_text(encoding=self.config.encoding),
                correlation_id=str(file_path),
            )
        except MalformedMarkupError as e:
            return {
                "file": str(file_path),
                "success": False,
                "error": str(e),
                "line": e.location.line if e.location else None,
                "column": e.location.column if e.location else None,
            }
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(
                "Failed to read file", extra={"file_path": str(file_path)}
            )
            return {"file": str(file_path), "success": False, "error": str(e)}

        return {
            "file": str(file_path),
            "success": True,
            "summary": result.summary(),
            "tree": result.root,
        }

    def find_markup_files(self, path: Path, recursive: bool = False) -> Iterator[Path]:
        """Yield markup files for a path; explicit files are always included."""
        if path.is_dir():
            pattern = "**/*" if recursive else "*"
            for candidate in sorted(path.glob(pattern)):
                if candidate.is_file() and candidate.suffix.lower() in MARKUP_SUFFIXES:
                    yield candidate
        else:
            yield path

    def batch_process(
        self, paths: List[Path], recursive: bool = False
    ) -> List[Dict[str, Any]]:
        """Process every markup file found under ``paths``."""
        results = []
        for path in paths:
            for file_path in self.find_markup_files(path, recursive):
                results.append(self.process_single_file(file_path))
        return results


def render_tree(node: Node, depth: int = 0) -> str:
    """Render a node tree as an indented debug listing."""
    indent = TREE_INDENT * depth
    kind = node_kind(node)
    if kind is NodeKind.TEXT:
        return f"{indent}Text {node.data!r}"
    if kind is NodeKind.COMMENT:
        return f"{indent}Comment {node.data!r}"

    attributes = "".join(
        f" {name}={value!r}" for name, value in sorted(node.attributes.items())
    )
    lines = [f"{indent}Element <{node.tag}{attributes}>"]
    lines.extend(render_tree(child, depth + 1) for child in node.children)
    return "\n".join(lines)


def format_results(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format processing results for output."""
    if format_type == "tree":
        blocks = []
        for result in results:
            if result["success"]:
                blocks.append(f"# {result['file']}\n{render_tree(result['tree'])}")
            else:
                blocks.append(f"# {result['file']}\nError: {result['error']}")
        return "\n\n".join(blocks)

    if format_type == "summary":
        if not results:
            return "No files processed."
        successful = sum(1 for r in results if r["success"])
        lines = [f"Parsed {len(results)} files, {successful} well formed", "-" * 60]
        for result in results:
            if result["success"]:
                summary = result["summary"]
                lines.append(f"OK    {result['file']}")
                lines.append(
                    f"      elements: {summary['element_count']}, "
                    f"text: {summary['text_count']}, "
                    f"comments: {summary['comment_count']}, "
                    f"depth: {summary['max_depth']}, "
                    f"time: {summary['processing_time_ms']:.1f}ms"
                )
            else:
                lines.append(f"FAIL  {result['file']}")
                lines.append(f"      {result['error']}")
        return "\n".join(lines)

    serializable = []
    for result in results:
        entry = dict(result)
        if "tree" in entry:
            entry["tree"] = to_dict(entry["tree"])
        serializable.append(entry)
    return json.dumps(serializable, indent=2, ensure_ascii=False)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="strict-markup",
        description="Parse well-formed markup documents into trees",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet output")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_common_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "paths", nargs="+", type=Path, help="Markup files or directories"
        )
        sub.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Recursively process directories",
        )
        sub.add_argument(
            "--config", "-c", type=Path, help="JSON parser configuration file"
        )
        sub.add_argument(
            "--encoding", default="utf-8", help="File encoding (default: utf-8)"
        )
        sub.add_argument(
            "--root-tag", help="Tag of the synthesized document root (default: html)"
        )
        sub.add_argument(
            "--max-depth",
            type=int,
            help="Maximum element nesting depth (0 disables the limit)",
        )

    parse_parser = subparsers.add_parser("parse", help="Parse files and print trees")
    add_common_arguments(parse_parser)
    parse_parser.add_argument(
        "--format", "-f",
        choices=["json", "tree", "summary"],
        default="json",
        help="Output format (default: json)",
    )
    parse_parser.add_argument(
        "--output", "-o", type=Path, help="Output file (default: stdout)"
    )

    check_parser = subparsers.add_parser("check", help="Check files are well formed")
    add_common_arguments(check_parser)

    return parser


def cmd_parse(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle parse command."""
    processor = MarkupProcessor(config)
    results = processor.batch_process(args.paths, args.recursive)
    formatted_output = format_results(results, config.output_format)

    if args.output:
        try:
            args.output.write_text(formatted_output + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        if not config.quiet:
            print(f"Results written to {args.output}", file=sys.stderr)
    else:
        print(formatted_output)

    if not results:
        return 1
    return 0 if all(r["success"] for r in results) else 1


def cmd_check(args: argparse.Namespace, config: CLIConfig) -> int:
    """Handle check command."""
    processor = MarkupProcessor(config)
    results = processor.batch_process(args.paths, args.recursive)

    for result in results:
        if result["success"]:
            if not config.quiet:
                print(f"OK    {result['file']}")
        else:
            print(f"FAIL  {result['file']}: {result['error']}")

    if not results:
        return 1
    return 0 if all(r["success"] for r in results) else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = CLIConfig.from_args(args)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("ERROR")
    else:
        configure_logging(config.parser_config.log_level)

    try:
        if args.command == "parse":
            return cmd_parse(args, config)
        if args.command == "check":
            return cmd_check(args, config)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
