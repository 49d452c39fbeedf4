"""
Package version.

Matches the installed distribution; editable checkouts without metadata fall
back to the ``version`` line in the repository's pyproject.toml.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from pathlib import Path

__all__ = ["__version__"]

DISTRIBUTION = "json-to-javascript"


def _pyproject_version() -> str | None:
	# src/json_to_javascript/version.py -> repository root
	pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
	if not pyproject.is_file():
		return None
	for line in pyproject.read_text().splitlines():
		key, sep, value = line.partition("=")
		if sep and key.strip() == "version":
			return value.strip().strip("\"'") or None
	return None


def _resolve_version() -> str:
	try:
		return _pkg_version(DISTRIBUTION)
	except PackageNotFoundError:
		pass
	return _pyproject_version() or "0.0.0"


__version__: str = _resolve_version()
