"""Application metadata — single source of truth.

The human-friendly name lives here; the semantic version is read from the repository VERSION file.
"""

from pathlib import Path


def _load_version() -> str:
	"""Read the semantic version from the repository VERSION file."""
	version_file = Path(__file__).resolve().parents[2] / "VERSION"
	try:
		return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
	except FileNotFoundError:  # pragma: no cover - only outside a checkout
		return "0.0.0"


__app_name__ = "Drive Image Links API"
__version__ = _load_version()
