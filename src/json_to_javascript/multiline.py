"""
Decide which strings can be emitted as dedented template literals, and the
small string helpers used to splice them into formatted code.

A converted string is written as::

	 dedent`
	  first line
	  second line
	`

and the runtime ``dedent`` helper is expected to drop the blank first and last
lines and strip the indentation shared by every content line. A string is only
converted when that round trip gives back the exact original.
"""

from __future__ import annotations

import re

INDENT_UNIT = "  "

# Characters that cannot appear verbatim in a template literal body without
# changing its value: interpolation, escapes, and line terminators that JS
# normalizes (CR, CRLF) or treats as line breaks in regexes (U+2028/U+2029).
_FORBIDDEN = ("$", "\\", "\r", "\u2028", "\u2029")
# Lone surrogates can only be written as escapes, never as raw source text.
_SURROGATE = re.compile("[\ud800-\udfff]")


def _is_js_whitespace(ch: str) -> bool:
	return ch.isspace() or ch == "\ufeff"


def is_eligible(value: str, *, allow_backticks: bool = False) -> bool:
	"""Return True when ``value`` can become a multi-line template literal.

	Requirements, all of which must hold:
	- the string contains a newline;
	- it has no ``$``, ``\\``, CR, U+2028, U+2029 or lone surrogate, and no
	  backtick unless ``allow_backticks`` is set (backticks are then escaped);
	- the first line is non-empty and does not start with whitespace;
	- the last line is non-empty and does not end with whitespace.
	"""
	if "\n" not in value:
		return False
	if not allow_backticks and "`" in value:
		return False
	if any(ch in value for ch in _FORBIDDEN):
		return False
	if _SURROGATE.search(value):
		return False
	lines = value.split("\n")
	first, last = lines[0], lines[-1]
	if not first or _is_js_whitespace(first[0]):
		return False
	if not last or _is_js_whitespace(last[-1]):
		return False
	return True


def escape_template(body: str) -> str:
	"""Escape a string for use inside a raw template literal body."""
	return body.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def leading_whitespace(line: str) -> str:
	stripped = line.lstrip(" \t")
	return line[: len(line) - len(stripped)]


def reindent(body: str, indent: str) -> str:
	"""Push every continuation line one level deeper than ``indent``."""
	return body.replace("\n", "\n" + indent + INDENT_UNIT)


def template_literal(
	body: str,
	indent: str,
	*,
	prefix: str = " dedent",
	suffix: str = "",
) -> str:
	"""Build the full replacement text for one converted string."""
	indented = reindent(escape_template(body), indent)
	return "\n".join(
		[
			f"{prefix}`",
			f"{indent}{INDENT_UNIT}{indented}",
			f"{indent}`{suffix}",
		]
	)
