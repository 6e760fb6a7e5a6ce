"""crumble — a permissive, recursive MIME structure parser.

Turns a raw MIME document into a tree of headers and sections without
decoding anything::

    from crumble import parse_message

    message = parse_message(raw_text)
    for section in message.walk():
        ...
"""

from .boundary import (
    DEFAULT_SCAN_WINDOW,
    extract_boundary,
    has_boundary,
    has_headers,
    is_multipart,
)
from .config import ParserConfig
from .errors import (
    CrumbleError,
    InvalidEncoding,
    InvalidString,
    NestingTooDeep,
    ParseError,
    Unknown,
)
from .headers import parse_headers
from .logging import get_logger, setup_logging
from .models import (
    EMPTY,
    EmptySection,
    Header,
    Message,
    MultipartSection,
    PlainSection,
    Section,
)
from .parser import MimeParser, parse_message, parse_message_bytes
from .section import SectionParser, parse_section

__all__ = [
    "DEFAULT_SCAN_WINDOW",
    "EMPTY",
    "CrumbleError",
    "EmptySection",
    "Header",
    "InvalidEncoding",
    "InvalidString",
    "Message",
    "MimeParser",
    "MultipartSection",
    "NestingTooDeep",
    "ParseError",
    "ParserConfig",
    "PlainSection",
    "Section",
    "SectionParser",
    "Unknown",
    "extract_boundary",
    "get_logger",
    "has_boundary",
    "has_headers",
    "is_multipart",
    "parse_headers",
    "parse_message",
    "parse_message_bytes",
    "parse_section",
    "setup_logging",
]
