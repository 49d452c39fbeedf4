"""
Python model of the runtime ``dedent`` helper that generated code relies on.

The helper receives the body of a template literal and:
- drops the first line if it is blank,
- drops the last line if it is blank,
- removes the leading whitespace shared by every non-blank line
  (blank lines lose at most that much).

``dedent`` (npm) and the smaller ``lines`` helper from gha-ts both satisfy this
for every string the classifier accepts. This module lets tests and callers
check generated code without running a JS engine.
"""

from __future__ import annotations

import re

from json_to_javascript.multiline import leading_whitespace

_TEMPLATE = re.compile(r"`((?:\\.|[^`\\])*)`", re.DOTALL)
_ESCAPE = re.compile(r"\\([`$\\])")


def dedent(raw: str) -> str:
	lines = raw.split("\n")
	if lines and not lines[0].strip():
		lines = lines[1:]
	if lines and not lines[-1].strip():
		lines = lines[:-1]
	widths = [len(leading_whitespace(line)) for line in lines if line.strip()]
	if not widths:
		return "\n".join(lines)
	shared = min(widths)
	return "\n".join(
		line[min(shared, len(leading_whitespace(line))) :] for line in lines
	)


def template_bodies(code: str) -> list[str]:
	"""Cooked bodies of every template literal in ``code``, in source order.

	Backticks inside ordinary string literals are not told apart from template
	delimiters, so ``code`` should only contain backticks in template literals.
	"""
	return [_ESCAPE.sub(r"\1", m.group(1)) for m in _TEMPLATE.finditer(code)]
