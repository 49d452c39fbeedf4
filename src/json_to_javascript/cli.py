"""
Command-line interface for json-to-javascript.
Reads a JSON document, converts it and writes the JavaScript source.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from json_to_javascript.converter import ConversionOptions, Converter
from json_to_javascript.errors import FormattingError, JsonToJavascriptError

cli = typer.Typer(
	name="json-to-javascript",
	help="Convert JSON data to JavaScript code literals",
	no_args_is_help=True,
	add_completion=False,
)


def _configure_logging(verbose: bool, console: Console) -> None:
	if not verbose:
		return
	logging.basicConfig(
		level=logging.DEBUG,
		format="%(message)s",
		handlers=[RichHandler(console=console, show_path=False)],
		force=True,
	)


def parse_formatter_options(raw: str | None) -> dict[str, Any] | None:
	if raw is None:
		return None
	try:
		parsed = json.loads(raw)
	except json.JSONDecodeError as exc:
		raise ValueError(f"--formatter-options is not valid JSON ({exc.msg})") from None
	if not isinstance(parsed, dict):
		raise ValueError("--formatter-options must be a JSON object")
	return parsed


@cli.command()
def convert_file(
	input_file: Path = typer.Option(..., "--input-file", help="Input JSON file"),
	output_file: Path = typer.Option(..., "--output-file", help="Output file"),
	prefix: str = typer.Option("(", "--prefix", help="Prefix the output with a string"),
	suffix: str = typer.Option(")", "--suffix", help="Suffix the output with a string"),
	use_formatter: bool = typer.Option(
		True, "--use-formatter/--no-use-formatter", help="Format the output with prettier"
	),
	formatter_options: str | None = typer.Option(
		None, "--formatter-options", help="Prettier options as a JSON object"
	),
	use_multiline_literals: bool = typer.Option(
		False,
		"--use-multiline-literals/--no-use-multiline-literals",
		help="Emit multiline strings as dedent template literals",
	),
	multiline_literal_prefix: str = typer.Option(
		" dedent", "--multiline-literal-prefix", help="Text before each template literal"
	),
	multiline_literal_suffix: str = typer.Option(
		"", "--multiline-literal-suffix", help="Text after each template literal"
	),
	stringify_space: int | None = typer.Option(
		None, "--stringify-space", help="Indentation of the intermediate JSON"
	),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log conversion details"),
):
	"""Convert a JSON file to a JavaScript literal expression."""
	console = Console(stderr=True, soft_wrap=True)
	_configure_logging(verbose, console)

	try:
		parsed_formatter_options = parse_formatter_options(formatter_options)
	except ValueError as exc:
		console.print(f"❌ {escape(str(exc))}")
		raise typer.Exit(1) from None

	try:
		data = json.loads(input_file.read_text(encoding="utf-8"))
	except OSError as exc:
		console.print(f"❌ Cannot read {escape(str(input_file))}: {escape(str(exc.strerror or exc))}")
		raise typer.Exit(1) from None
	except json.JSONDecodeError as exc:
		console.print(f"❌ {escape(str(input_file))} is not valid JSON: {escape(str(exc))}")
		raise typer.Exit(1) from None

	options = ConversionOptions(
		prefix=prefix,
		suffix=suffix,
		use_formatter=use_formatter,
		formatter_options=parsed_formatter_options,
		use_multiline_literals=use_multiline_literals,
		multiline_literal_prefix=multiline_literal_prefix,
		multiline_literal_suffix=multiline_literal_suffix,
		stringify_space=stringify_space,
	)

	try:
		result = Converter().convert(data, options)
	except FormattingError as exc:
		console.print(f"❌ {escape(str(exc))}")
		if exc.__cause__ is not None:
			console.print(f"   [dim]{escape(str(exc.__cause__))}[/dim]")
		raise typer.Exit(1) from None
	except JsonToJavascriptError as exc:
		console.print(f"❌ {escape(str(exc))}")
		raise typer.Exit(1) from None

	output_file.write_text(result.code, encoding="utf-8")
	if result.used_multiline_literals:
		name = multiline_literal_prefix.strip() or "dedent"
		console.print(f"ℹ️  Output uses template literals; make sure `{name}` is in scope")


def main():
	"""Main CLI entry point."""
	cli()


if __name__ == "__main__":
	main()
