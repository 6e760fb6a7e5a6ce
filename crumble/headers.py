"""Header folding: raw header text → ordered key/value pairs.

A key is a run of ``[0-9A-Za-z_-]`` at the start of a line, directly
followed by ``:``.  Mailers in the wild (GMail among them) fold values
across lines without the leading whitespace RFC 5322 asks for, so a value
is simply everything between one key and the next.  Continuation lines
therefore land in the previous header's value, embedded newlines included.
"""

from __future__ import annotations

import re

from .models import Header

HEADER_KEY_RE = re.compile(r"^[0-9A-Za-z_\-]+:", re.MULTILINE)


def parse_headers(raw_headers: str) -> tuple[Header, ...]:
    """Split a header block into :class:`Header` values, in order.

    Text before the first recognised key is ignored, and a block with no
    keys at all yields an empty tuple.
    """
    matches = list(HEADER_KEY_RE.finditer(raw_headers))

    headers: list[Header] = []
    for index, match in enumerate(matches):
        key = match.group()[:-1].lower()
        if index + 1 < len(matches):
            value_end = matches[index + 1].start()
        else:
            value_end = len(raw_headers)
        value = raw_headers[match.end():value_end].strip()
        headers.append(Header(key=key, value=value))

    return tuple(headers)
