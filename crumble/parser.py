"""Message parser: raw MIME document → :class:`Message`.

Plain and multipart documents take different paths.  A plain document
is a header block, a blank line and a body.  A multipart document is cut
on ``--<boundary>`` (the first quoted ``boundary=`` value anywhere in the
document); the text before the first marker holds the top-level headers
and every later fragment becomes a top-level section, including the one
after the closing marker, which usually parses to :class:`EmptySection`.
"""

from __future__ import annotations

from . import boundary as detector
from .config import ParserConfig
from .errors import InvalidEncoding, InvalidString
from .headers import parse_headers
from .logging import get_logger
from .models import Message
from .section import SectionParser

logger = get_logger(__name__)


class MimeParser:
    """Stateless parser: raw MIME text → :class:`Message`.

    Instances only hold their (immutable) config and can be shared between
    threads.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()
        self._sections = SectionParser(self._config)

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, text: str) -> Message:
        if not text:
            logger.warning("message_empty")
            raise InvalidString()

        if detector.is_multipart(text):
            message = self._parse_multipart(text)
            kind = "multipart"
        else:
            message = self._parse_plain(text)
            kind = "plain"

        logger.debug(
            "message_parsed",
            kind=kind,
            headers=len(message.headers),
            sections=len(message.sections),
        )
        return message

    def parse_bytes(self, raw: bytes) -> Message:
        """Decode *raw* with ``config.encoding`` and parse the result."""
        try:
            text = raw.decode(self._config.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            logger.warning(
                "message_undecodable",
                encoding=self._config.encoding,
                error=str(exc),
            )
            raise InvalidEncoding() from exc
        return self.parse(text)

    # ------------------------------------------------------------------
    # Framing
    # ------------------------------------------------------------------

    def _parse_plain(self, text: str) -> Message:
        split = detector.split_header_block(text)
        if len(split) != 2 or not split[0] or not split[1]:
            logger.warning("message_missing_header_separator", length=len(text))
            raise InvalidString()

        raw_headers, body = split
        return Message(
            headers=parse_headers(raw_headers),
            sections=(self._sections.parse(body),),
        )

    def _parse_multipart(self, text: str) -> Message:
        boundary = detector.extract_boundary(text)
        if boundary is None:
            logger.warning("message_boundary_missing", length=len(text))
            raise InvalidString()

        raw_headers, *fragments = text.split(f"--{boundary}")
        logger.debug("message_split", boundary=boundary, fragments=len(fragments))
        return Message(
            headers=parse_headers(raw_headers),
            sections=tuple(self._sections.parse(fragment) for fragment in fragments),
        )


def parse_message(text: str, config: ParserConfig | None = None) -> Message:
    """Parse a MIME document held in memory as text."""
    return MimeParser(config).parse(text)


def parse_message_bytes(raw: bytes, config: ParserConfig | None = None) -> Message:
    """Decode and parse a MIME document held in memory as bytes."""
    return MimeParser(config).parse_bytes(raw)
