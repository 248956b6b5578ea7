"""Standard warning message catalogue for lookup results."""

from __future__ import annotations

from typing import Final

WARNING_MESSAGES: Final[dict[str, str]] = {
    "PHASE_BOUNDARY": "Interpolation between different phases may be inaccurate",
    "TABLE_EMPTY": "Reference table is empty or could not be loaded",
    "UNSUPPORTED_CONVERSION": "No conversion factor for the requested unit pair",
}


def format_warning(code: str, detail: str | None = None) -> str:
    """Return a formatted warning string with catalogue lookup."""

    base = WARNING_MESSAGES.get(code, code)
    if detail:
        return f"[{code}] {base}: {detail}"
    return f"[{code}] {base}"


__all__ = ["format_warning", "WARNING_MESSAGES"]
