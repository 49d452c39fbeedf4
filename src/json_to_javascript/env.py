"""
Environment-backed settings.

Values are read from ``os.environ`` on every access so tests and the CLI can
change them at runtime through the ``env`` singleton.
"""

from __future__ import annotations

import os
import shlex

ENV_DEBUG_ALLOW_BACKTICKS = "JSON_TO_JS_DEBUG_ALLOW_BACKTICKS"
ENV_PRETTIER = "JSON_TO_JS_PRETTIER"
ENV_FORMATTER_TIMEOUT = "JSON_TO_JS_FORMATTER_TIMEOUT"


class Env:
	def _get(self, key: str) -> str | None:
		return os.environ.get(key)

	def _set(self, key: str, value: str | None) -> None:
		if value is None:
			os.environ.pop(key, None)
		else:
			os.environ[key] = value

	@property
	def allow_backticks(self) -> bool:
		"""Experimental: let strings with backticks become template literals."""
		return self._get(ENV_DEBUG_ALLOW_BACKTICKS) == "1"

	@allow_backticks.setter
	def allow_backticks(self, value: bool) -> None:
		self._set(ENV_DEBUG_ALLOW_BACKTICKS, "1" if value else None)

	@property
	def prettier_command(self) -> list[str] | None:
		raw = self._get(ENV_PRETTIER)
		if not raw:
			return None
		return shlex.split(raw)

	@prettier_command.setter
	def prettier_command(self, value: str | None) -> None:
		self._set(ENV_PRETTIER, value)

	@property
	def formatter_timeout(self) -> float | None:
		raw = self._get(ENV_FORMATTER_TIMEOUT)
		if not raw:
			return None
		try:
			return float(raw)
		except ValueError:
			raise ValueError(
				f"{ENV_FORMATTER_TIMEOUT} must be a number of seconds, got {raw!r}"
			) from None

	@formatter_timeout.setter
	def formatter_timeout(self, value: float | None) -> None:
		self._set(ENV_FORMATTER_TIMEOUT, None if value is None else str(value))


env = Env()
