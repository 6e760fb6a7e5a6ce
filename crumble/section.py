"""Recursive section parser.

A section is one of:

* a boundary terminator left over from splitting → :class:`EmptySection`.
  ``"--\\n"``, ``"--\\r\\n"`` and a bare ``"--"`` all count, so CRLF
  documents and documents cut right after the closing marker end in an
  :class:`EmptySection` too, where a stricter ``"--\\n"``-only match would
  leave a bare ``"--"`` as a :class:`PlainSection`;
* text without a ``content-type`` header → :class:`PlainSection`, its body
  encoded back to bytes with ``config.encoding`` (``surrogateescape``, so
  bytes that did not decode round-trip unchanged);
* headers declaring a boundary → :class:`MultipartSection` whose children
  are the parts between ``--<boundary>`` markers;
* headers without a boundary → :class:`MultipartSection` with exactly one
  child, parsed from everything after the first blank line.
"""

from __future__ import annotations

from . import boundary as detector
from .config import ParserConfig
from .errors import InvalidEncoding, NestingTooDeep, ParseError
from .headers import parse_headers
from .logging import get_logger
from .models import EMPTY, MultipartSection, PlainSection, Section

logger = get_logger(__name__)

TERMINATOR_ARTIFACTS = frozenset({"--", "--\n", "--\r\n"})


class SectionParser:
    """Stateless recursive parser: raw section text → :class:`Section`."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, text: str, depth: int = 0) -> Section:
        """Parse *text* into a section tree.

        *depth* is the nesting level of *text*; it only grows through
        recursion and is checked against ``config.max_depth``.
        """
        if depth > self._config.max_depth:
            logger.warning(
                "section_nesting_too_deep",
                depth=depth,
                max_depth=self._config.max_depth,
            )
            raise NestingTooDeep(self._config.max_depth)

        if text in TERMINATOR_ARTIFACTS:
            return EMPTY

        window = self._config.scan_window
        if not detector.has_headers(text, window):
            return PlainSection(body=self._encode_body(text, depth))

        if detector.has_boundary(text, window):
            return self._parse_nested(text, depth)
        return self._parse_flat(text, depth)

    # ------------------------------------------------------------------
    # Section shapes
    # ------------------------------------------------------------------

    def _parse_nested(self, text: str, depth: int) -> MultipartSection:
        boundary = detector.extract_boundary(text)
        if not boundary:
            logger.warning("section_boundary_unextractable", depth=depth)
            raise ParseError()

        fragments = text.split(f"--{boundary}")
        headers = parse_headers(fragments[0])
        # fragments[-1] is whatever follows the closing marker
        children = tuple(
            self.parse(fragment, depth + 1) for fragment in fragments[1:-1]
        )
        logger.debug(
            "section_split",
            boundary=boundary,
            fragments=len(fragments),
            children=len(children),
            depth=depth,
        )
        return MultipartSection(headers=headers, body=children)

    def _encode_body(self, text: str, depth: int) -> bytes:
        try:
            return text.encode(self._config.encoding, errors="surrogateescape")
        except (UnicodeEncodeError, LookupError) as exc:
            logger.warning(
                "section_unencodable",
                encoding=self._config.encoding,
                depth=depth,
                error=str(exc),
            )
            raise InvalidEncoding() from exc

    def _parse_flat(self, text: str, depth: int) -> MultipartSection:
        split = detector.split_header_block(text)
        headers = parse_headers(split[0])
        body = split[1] if len(split) == 2 else ""
        return MultipartSection(
            headers=headers,
            body=(self.parse(body, depth + 1),),
        )


def parse_section(text: str, config: ParserConfig | None = None) -> Section:
    """Parse a single raw section with a throwaway :class:`SectionParser`."""
    return SectionParser(config).parse(text)
