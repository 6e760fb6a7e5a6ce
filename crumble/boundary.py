"""Heuristics for spotting headers and multipart boundaries.

``has_headers`` and ``has_boundary`` only look at the first
``window`` characters of a section: headers and boundary declarations are
expected near the top, and scanning large base64 bodies is wasted work.
A section that declares ``boundary=`` past the window is read as a flat
header+body section.  Pass ``window=0`` to scan everything.
"""

from __future__ import annotations

import re

DEFAULT_SCAN_WINDOW = 3000

CONTENT_TYPE_RE = re.compile(r"content-type:[ \t]*\S", re.IGNORECASE)
BOUNDARY_DECLARED_RE = re.compile(r"boundary=.", re.IGNORECASE)
BOUNDARY_VALUE_RE = re.compile(
    r"""boundary=(?P<quote>["'])(?P<boundary>[\x20-\x7e]+?)(?P=quote)""",
    re.IGNORECASE,
)
MULTIPART_RE = re.compile(r"content-type:\s*multipart", re.IGNORECASE)

# Two or more line breaks in a row, in any of the usual line-ending styles.
BLANK_LINE_RE = re.compile(r"(?:\r?\n){2,}|\r{2,}")


def _window(text: str, window: int) -> str:
    if window and len(text) > window:
        return text[:window]
    return text


def has_headers(text: str, window: int = DEFAULT_SCAN_WINDOW) -> bool:
    """True if a ``content-type:`` header shows up within the window."""
    return CONTENT_TYPE_RE.search(_window(text, window)) is not None


def has_boundary(text: str, window: int = DEFAULT_SCAN_WINDOW) -> bool:
    """True if a ``boundary=`` assignment shows up within the window."""
    return BOUNDARY_DECLARED_RE.search(_window(text, window)) is not None


def extract_boundary(text: str) -> str | None:
    """Return the first quoted ``boundary=`` value in *text*, or None.

    Unquoted declarations are not recognised.
    """
    match = BOUNDARY_VALUE_RE.search(text)
    if match is None:
        return None
    return match.group("boundary")


def is_multipart(text: str) -> bool:
    """True if any ``content-type:`` value in *text* starts with ``multipart``.

    Unlike the section-level checks this scans the whole document.
    """
    return MULTIPART_RE.search(text) is not None


def split_header_block(text: str) -> list[str]:
    """Split *text* once on its first blank-line run."""
    return BLANK_LINE_RE.split(text, maxsplit=1)
