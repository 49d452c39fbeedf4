"""
Convert JSON-compatible values into JavaScript literal expressions.

Eligible multi-line strings are swapped for placeholder tokens while the value
is serialized, the resulting skeleton is run through the formatter, and each
token is then replaced with an indented template literal aligned to the column
where the formatter left it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from json_to_javascript.env import env
from json_to_javascript.errors import (
	FormattingError,
	MarkerCollisionError,
	PlaceholderNotFoundError,
)
from json_to_javascript.formatter import (
	DEFAULT_PARSER,
	Formatter,
	PrettierFormatter,
)
from json_to_javascript.multiline import (
	is_eligible,
	leading_whitespace,
	template_literal,
)
from json_to_javascript.serializer import Replacer, stringify

logger = logging.getLogger(__name__)

# it's random, I swear
DEFAULT_MARKER = "MARKER_b67575ae-db24-47f3-9c7d-e8b46b84228b_"


@dataclass
class ConversionOptions:
	"""
	Options for a single conversion.

	Attributes:
	    prefix: Text placed before the serialized value.
	    suffix: Text placed after the serialized value.
	    use_formatter: Run the formatter over the wrapped code.
	    formatter_options: Passed to the formatter verbatim. ``parser`` defaults to ``"babel"``.
	    before_format: Transform applied to the wrapped code before formatting.
	    use_multiline_literals: Emit eligible multi-line strings as template literals.
	    multiline_literal_prefix: Inserted before the opening backtick, usually a tag name.
	    multiline_literal_suffix: Inserted after the closing backtick.
	    stringify_replacer: ``JSON.stringify`` style replacer; returning None keeps the value.
	    stringify_space: ``JSON.stringify`` style indentation for the skeleton.
	    allow_backticks: Let strings containing backticks be converted. None reads the environment.
	"""

	prefix: str = "("
	suffix: str = ")"
	use_formatter: bool = True
	formatter_options: Mapping[str, Any] | None = None
	before_format: Callable[[str], str] | None = None
	use_multiline_literals: bool = False
	multiline_literal_prefix: str = " dedent"
	multiline_literal_suffix: str = ""
	stringify_replacer: Replacer | None = None
	stringify_space: int | str | None = None
	allow_backticks: bool | None = None


@dataclass(frozen=True, slots=True)
class ConversionResult:
	code: str
	used_multiline_literals: bool
	"""True when the code contains template literals that need the dedent helper."""


def find_placeholder(code: str, token: str) -> tuple[int, str] | None:
	"""Locate the first quoted occurrence of ``token``, in either quote style."""
	best: tuple[int, str] | None = None
	for quote in ('"', "'"):
		quoted = f"{quote}{token}{quote}"
		pos = code.find(quoted)
		if pos != -1 and (best is None or pos < best[0]):
			best = (pos, quoted)
	return best


class Converter:
	"""Holds the placeholder marker and formatter shared by many conversions.

	A converter is safe to use from several threads as long as nobody calls
	``set_marker`` while a conversion is running.
	"""

	marker: str
	formatter: Formatter

	def __init__(
		self,
		*,
		marker: str = DEFAULT_MARKER,
		formatter: Formatter | None = None,
	) -> None:
		self.set_marker(marker)
		self.formatter = formatter if formatter is not None else PrettierFormatter()

	def set_marker(self, marker: str) -> None:
		if not marker:
			raise ValueError("marker must be a non-empty string")
		self.marker = marker

	def convert(
		self, value: Any, options: ConversionOptions | None = None
	) -> ConversionResult:
		opts = options or ConversionOptions()
		marker = self.marker
		pending: list[str] = []

		skeleton = self._serialize(value, opts, marker, pending)
		code = opts.prefix + skeleton + opts.suffix
		if pending and code.count(marker) > len(pending):
			raise MarkerCollisionError(marker)
		logger.debug("Serialized value with %d multiline placeholder(s)", len(pending))

		if opts.before_format is not None:
			code = opts.before_format(code)

		if opts.use_formatter:
			formatter_options = {"parser": DEFAULT_PARSER, **(opts.formatter_options or {})}
			try:
				code = self.formatter.format(code, formatter_options)
			except Exception as exc:
				raise FormattingError() from exc

		for index, original in enumerate(pending):
			code = self._splice(code, f"{marker}{index}", original, opts)

		return ConversionResult(code=code, used_multiline_literals=len(pending) > 0)

	def _serialize(
		self,
		value: Any,
		opts: ConversionOptions,
		marker: str,
		pending: list[str],
	) -> str:
		allow_backticks = (
			opts.allow_backticks
			if opts.allow_backticks is not None
			else env.allow_backticks
		)
		user_replacer = opts.stringify_replacer

		def replacer(key: str, node: Any) -> Any:
			token = None
			if (
				opts.use_multiline_literals
				and isinstance(node, str)
				and is_eligible(node, allow_backticks=allow_backticks)
			):
				token = f"{marker}{len(pending)}"
			candidate = node if token is None else token
			if user_replacer is not None:
				result = user_replacer(key, candidate)
				if result is not None:
					candidate = result
			# only a token that is actually emitted gets a pending entry
			if token is not None and candidate == token:
				pending.append(node)
			return candidate

		serialized = stringify(value, replacer=replacer, space=opts.stringify_space)
		# JS string concatenation of an omitted root
		return "undefined" if serialized is None else serialized

	def _splice(
		self, code: str, token: str, original: str, opts: ConversionOptions
	) -> str:
		found = find_placeholder(code, token)
		if found is None:
			raise PlaceholderNotFoundError(token)
		start, quoted = found
		line_start = code.rfind("\n", 0, start) + 1
		indent = leading_whitespace(code[line_start:start])
		literal = template_literal(
			original,
			indent,
			prefix=opts.multiline_literal_prefix,
			suffix=opts.multiline_literal_suffix,
		)
		logger.debug("Splicing %s at column %d", token, len(indent))
		return code[:start] + literal + code[start + len(quoted) :]


def convert(
	value: Any,
	options: ConversionOptions | None = None,
	*,
	marker: str | None = None,
	formatter: Formatter | None = None,
	**overrides: Any,
) -> ConversionResult:
	"""Convert ``value`` to JavaScript source.

	Keyword overrides are applied on top of ``options``::

	    convert({"a": "x\\ny"}, use_multiline_literals=True, prefix="const a = (")
	"""
	opts = options or ConversionOptions()
	if overrides:
		opts = replace(opts, **overrides)
	converter = Converter(marker=marker or DEFAULT_MARKER, formatter=formatter)
	return converter.convert(value, opts)
