"""Error kinds raised by the parser.

The parser is permissive: most irregularities are absorbed into the
parsed tree. Errors are only raised where continuing would mean guessing
a boundary or a document shape from nothing.
"""

from __future__ import annotations


class CrumbleError(Exception):
    """Base class for every error raised while parsing a document."""

    default_message = "Error parsing message"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidString(CrumbleError):
    """The document lacks the minimal structural shape of a MIME message."""

    default_message = "Error parsing message: Invalid string"


class ParseError(CrumbleError):
    """A boundary was declared but its value could not be extracted."""

    default_message = "Error parsing message: Invalid document"


class Unknown(CrumbleError):
    """Reserved catch-all; not raised by the normal parsing paths."""

    default_message = "Error parsing message: Unknown error"


class InvalidEncoding(CrumbleError):
    """Raw input bytes could not be decoded into text."""

    default_message = "Error parsing message: Invalid encoding"


class NestingTooDeep(CrumbleError):
    """Sections are nested deeper than the configured limit."""

    default_message = "Error parsing message: Nesting too deep"

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"{self.default_message} (max_depth={max_depth})")
        self.max_depth = max_depth
