"""Codepoint catalogue: bidi controls and invisible characters (Trojan Source)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

# Order is significant: it is the order used when listing the catalogue.
UNSAFE_CHARS: Mapping[str, str] = MappingProxyType({
    # Bidi controls
    "\u202A": "LRE (Left-to-Right Embedding)",
    "\u202B": "RLE (Right-to-Left Embedding)",
    "\u202C": "PDF (Pop Directional Formatting)",
    "\u202D": "LRO (Left-to-Right Override)",
    "\u202E": "RLO (Right-to-Left Override)",
    "\u2066": "LRI (Left-to-Right Isolate)",
    "\u2067": "RLI (Right-to-Left Isolate)",
    "\u2068": "FSI (First Strong Isolate)",
    "\u2069": "PDI (Pop Directional Isolate)",
    # Zero-width / invisible format chars
    "\u200B": "ZWSP (Zero Width Space)",
    "\u200C": "ZWNJ (Zero Width Non-Joiner)",
    "\u200D": "ZWJ (Zero Width Joiner)",
    "\u200E": "LRM (Left-to-Right Mark)",
    "\u200F": "RLM (Right-to-Left Mark)",
    "\uFEFF": "BOM/ZWNBSP (Zero Width No-Break Space)",
})

def codepoint_label(char: str) -> str:
    """Format a single character as its U+XXXX label.

    "\\u202e" -> "U+202E"
    """
    return f"U+{ord(char):04X}"


def lookup(char: str) -> str | None:
    """Return the catalogue name for a character, or None if it is not catalogued."""
    return UNSAFE_CHARS.get(char)


def codepoints() -> Iterator[tuple[str, str]]:
    """Yield (label, name) for every catalogued character, in catalogue order."""
    for char, name in UNSAFE_CHARS.items():
        yield codepoint_label(char), name
