import json
import re
from collections.abc import Callable, Mapping
from typing import Any

import pytest
from json_to_javascript.dedent import dedent
from json_to_javascript.env import (
	ENV_DEBUG_ALLOW_BACKTICKS,
	ENV_FORMATTER_TIMEOUT,
	ENV_PRETTIER,
)

_TEMPLATE = re.compile(r"`((?:\\.|[^`\\])*)`", re.DOTALL)
_TEMPLATE_ESCAPE = re.compile(r"\\([`$\\])")


class StubFormatter:
	"""Records calls and lays code out with a caller-supplied function."""

	def __init__(self, layout: Callable[[str], str] | Mapping[str, str] | None = None):
		self.layout = layout
		self.calls: list[tuple[str, dict[str, Any]]] = []

	def format(self, code: str, options: Mapping[str, Any]) -> str:
		self.calls.append((code, dict(options)))
		if self.layout is None:
			return f"{code};\n"
		if callable(self.layout):
			return self.layout(code)
		return self.layout[code]


class FailingFormatter:
	def __init__(self, exc: Exception):
		self.exc = exc

	def format(self, code: str, options: Mapping[str, Any]) -> str:
		raise self.exc


def _evaluate(code: str, prefix: str = "(", suffix: str = ")") -> Any:
	"""Evaluate unformatted converter output the way a JS engine would.

	Template literals tagged with ``dedent`` are cooked, dedented and turned back
	into JSON strings, then the remaining JSON between prefix and suffix is parsed.
	JSON strings are skipped while scanning so their contents are never rewritten.
	"""
	assert code.startswith(prefix) and code.endswith(suffix)
	body = code[len(prefix) : len(code) - len(suffix)]
	tag = " dedent"
	out: list[str] = []
	i = 0
	while i < len(body):
		if body[i] == '"':
			end = i + 1
			while body[end] != '"':
				end += 2 if body[end] == "\\" else 1
			out.append(body[i : end + 1])
			i = end + 1
		elif body.startswith(tag + "`", i):
			match = _TEMPLATE.match(body, i + len(tag))
			assert match is not None
			cooked = _TEMPLATE_ESCAPE.sub(r"\1", match.group(1))
			out.append(json.dumps(dedent(cooked)))
			i = match.end()
		else:
			out.append(body[i])
			i += 1
	return json.loads("".join(out))


@pytest.fixture
def stub_formatter() -> StubFormatter:
	return StubFormatter()


@pytest.fixture
def evaluate() -> Callable[..., Any]:
	return _evaluate


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	monkeypatch.delenv(ENV_DEBUG_ALLOW_BACKTICKS, raising=False)
	monkeypatch.delenv(ENV_PRETTIER, raising=False)
	monkeypatch.delenv(ENV_FORMATTER_TIMEOUT, raising=False)
	yield
