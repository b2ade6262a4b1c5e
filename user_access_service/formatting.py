"""Display-name formatting rule."""

from __future__ import annotations


def format_name(name: str) -> str:
    """Return the canonical display form of ``name``.

    The rule is a plain case fold to upper case; the empty string maps to
    itself and already formatted names are left unchanged. Non-ASCII input
    follows Python's Unicode case mapping (``"straße"`` becomes
    ``"STRASSE"``).
    """
    return name.upper()
