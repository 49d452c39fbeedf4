"""JSON.stringify-compatible serialization with a per-node replacer hook."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any, final

Replacer = Callable[[str, Any], Any]


@final
class _Omit:
	"""Sentinel returned by a replacer to drop a value (JS ``undefined``)."""

	_instance: _Omit | None = None

	def __new__(cls) -> _Omit:
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self) -> str:
		return "OMIT"


OMIT = _Omit()

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def quote(value: str) -> str:
	"""Double-quoted JSON string, non-ASCII kept verbatim."""
	out = json.dumps(value, ensure_ascii=False)
	return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group(0)):04x}", out)


def format_number(value: int | float) -> str:
	if isinstance(value, int):
		return str(value)
	if math.isnan(value) or math.isinf(value):
		return "null"
	if value.is_integer() and abs(value) < 1e21:
		# Drops the sign of -0.0, as JSON.stringify does
		return str(int(value))
	return repr(value)


def _key(key: Any) -> str:
	if isinstance(key, str):
		return key
	if key is None:
		return "null"
	if isinstance(key, bool):
		return "true" if key else "false"
	if isinstance(key, (int, float)):
		return format_number(key)
	raise TypeError(
		f"keys must be str, int, float, bool or None, not {type(key).__name__}"
	)


def _gap(space: int | str | None) -> str:
	if space is None or isinstance(space, bool):
		return ""
	if isinstance(space, int):
		return " " * max(0, min(10, space))
	if isinstance(space, str):
		return space[:10]
	raise TypeError(f"space must be int, str or None, not {type(space).__name__}")


class _Stringifier:
	__slots__ = ("replacer", "gap", "stack")

	def __init__(self, replacer: Replacer | None, gap: str) -> None:
		self.replacer = replacer
		self.gap = gap
		self.stack: set[int] = set()

	def emit(self, key: str, value: Any, indent: str, out: list[str]) -> bool:
		"""Append the JSON text for ``value``. Returns False when omitted."""
		if self.replacer is not None:
			value = self.replacer(key, value)
		if value is OMIT:
			return False
		if value is None:
			out.append("null")
		elif isinstance(value, bool):
			out.append("true" if value else "false")
		elif isinstance(value, str):
			out.append(quote(value))
		elif isinstance(value, (int, float)):
			out.append(format_number(value))
		elif isinstance(value, Mapping):
			self._container(value, indent, out, self._object)
		elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
			self._container(value, indent, out, self._array)
		else:
			raise TypeError(
				f"Object of type {type(value).__name__} is not JSON serializable"
			)
		return True

	def _container(
		self,
		value: Any,
		indent: str,
		out: list[str],
		body: Callable[[Any, str, list[str]], None],
	) -> None:
		marker = id(value)
		if marker in self.stack:
			raise ValueError("Circular reference detected")
		self.stack.add(marker)
		try:
			body(value, indent, out)
		finally:
			self.stack.discard(marker)

	def _array(self, value: Sequence[Any], indent: str, out: list[str]) -> None:
		if not value:
			out.append("[]")
			return
		inner = indent + self.gap
		out.append("[")
		for i, item in enumerate(value):
			if i > 0:
				out.append(",")
			if self.gap:
				out.append("\n" + inner)
			if not self.emit(str(i), item, inner, out):
				out.append("null")
		if self.gap:
			out.append("\n" + indent)
		out.append("]")

	def _object(self, value: Mapping[Any, Any], indent: str, out: list[str]) -> None:
		inner = indent + self.gap
		colon = ": " if self.gap else ":"
		members: list[str] = []
		for k, v in value.items():
			key = _key(k)
			member: list[str] = [quote(key), colon]
			if self.emit(key, v, inner, member):
				members.append("".join(member))
		if not members:
			out.append("{}")
		elif self.gap:
			sep = ",\n" + inner
			out.append("{\n" + inner + sep.join(members) + "\n" + indent + "}")
		else:
			out.append("{" + ",".join(members) + "}")


def stringify(
	value: Any,
	*,
	replacer: Replacer | None = None,
	space: int | str | None = None,
) -> str | None:
	"""Serialize ``value`` the way ``JSON.stringify(value, replacer, space)`` does.

	The replacer is called with ``("", value)`` for the root, with member names
	for object values and with index strings for array items. Its return value
	is emitted as-is; ``OMIT`` drops object members and becomes ``null`` inside
	arrays. Returns None when the root itself is omitted.
	"""
	out: list[str] = []
	if not _Stringifier(replacer, _gap(space)).emit("", value, "", out):
		return None
	return "".join(out)
