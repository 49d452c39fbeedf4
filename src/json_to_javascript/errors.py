from __future__ import annotations


class JsonToJavascriptError(Exception):
	"""Base class for conversion failures."""


class FormattingError(JsonToJavascriptError):
	"""The formatter rejected the generated skeleton or failed to run.

	The underlying exception is available as ``__cause__``.
	"""

	def __init__(self, message: str | None = None) -> None:
		super().__init__(
			message
			or "Failed to format the generated code, consider turning off formatting with --no-use-formatter"
		)


class InternalConsistencyError(JsonToJavascriptError):
	"""Placeholder bookkeeping broke down. Always a bug, never retried."""


class PlaceholderNotFoundError(InternalConsistencyError):
	def __init__(self, token: str) -> None:
		super().__init__(f"Placeholder {token!r} is missing from the formatted code")
		self.token = token


class MarkerCollisionError(InternalConsistencyError):
	def __init__(self, marker: str) -> None:
		super().__init__(
			f"Input already contains the placeholder marker {marker!r}; use a different marker"
		)
		self.marker = marker


class FormatterError(RuntimeError):
	"""Base error for formatter process failures."""


class FormatterNotFoundError(FormatterError):
	"""Raised when the formatter executable cannot be started."""


class FormatterProcessError(FormatterError):
	"""Raised when the formatter exits with an error or times out."""

	def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
		super().__init__(message)
		self.returncode = returncode
		self.stderr = stderr
