from __future__ import annotations

import json
import logging
import os
import subprocess
import tempfile
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from json_to_javascript.env import env
from json_to_javascript.errors import FormatterNotFoundError, FormatterProcessError

logger = logging.getLogger(__name__)

DEFAULT_PRETTIER_COMMAND = ("npx", "--yes", "prettier")
DEFAULT_PARSER = "babel"


@runtime_checkable
class Formatter(Protocol):
	"""Re-lays-out source text without changing its meaning."""

	def format(self, code: str, options: Mapping[str, Any]) -> str: ...


class NullFormatter:
	"""Returns code unchanged."""

	def format(self, code: str, options: Mapping[str, Any]) -> str:
		return code


class PrettierFormatter:
	"""Run the ``prettier`` CLI in a subprocess, feeding code through stdin.

	Options are written to a temporary JSON config file, so any option prettier
	understands can be forwarded verbatim.
	"""

	command: Sequence[str] | None
	timeout: float | None

	def __init__(
		self,
		command: Sequence[str] | None = None,
		*,
		timeout: float | None = None,
	) -> None:
		self.command = command
		self.timeout = timeout

	def resolve_command(self) -> list[str]:
		if self.command:
			return list(self.command)
		return env.prettier_command or list(DEFAULT_PRETTIER_COMMAND)

	def format(self, code: str, options: Mapping[str, Any]) -> str:
		config = dict(options)
		parser = config.setdefault("parser", DEFAULT_PARSER)
		timeout = self.timeout if self.timeout is not None else env.formatter_timeout

		fd, config_path = tempfile.mkstemp(prefix="json-to-js-", suffix=".json")
		try:
			with os.fdopen(fd, "w", encoding="utf-8") as f:
				json.dump(config, f)
			args = [
				*self.resolve_command(),
				"--config",
				config_path,
				"--parser",
				str(parser),
			]
			logger.debug("Running formatter: %s", " ".join(args))
			try:
				proc = subprocess.run(
					args,
					input=code,
					capture_output=True,
					text=True,
					encoding="utf-8",
					timeout=timeout,
				)
			except FileNotFoundError as exc:
				raise FormatterNotFoundError(
					f"Formatter executable not found: {args[0]}"
				) from exc
			except subprocess.TimeoutExpired as exc:
				raise FormatterProcessError(
					f"Formatter timed out after {timeout} seconds"
				) from exc
		finally:
			os.unlink(config_path)

		if proc.returncode != 0:
			stderr = proc.stderr.strip()
			logger.warning("Formatter exited with code %s: %s", proc.returncode, stderr)
			raise FormatterProcessError(
				f"Formatter exited with code {proc.returncode}: {stderr}",
				returncode=proc.returncode,
				stderr=stderr,
			)
		return proc.stdout
