"""Parsed document tree: headers, sections and the message root.

Every node is a frozen dataclass holding tuples of its children, so a
parsed tree is immutable and exclusively owned by its parent.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SECTION_RULE = "------------"
MESSAGE_RULE = "########################"


@dataclass(frozen=True)
class Header:
    """A single key/value header; the key is stored lowercased."""

    key: str
    value: str

    def render(self) -> str:
        return f"{self.key}: {self.value}"

    def __str__(self) -> str:
        return self.render()


def render_headers(headers: Iterable[Header]) -> str:
    """Join headers as ``key: value`` lines."""
    return "\n".join(header.render() for header in headers)


class _HeaderLookup:
    """Read helpers shared by nodes that carry a header sequence."""

    headers: tuple[Header, ...]

    def get_header(self, key: str) -> str | None:
        """Return the value of the first header named *key*, or None."""
        key = key.lower()
        for header in self.headers:
            if header.key == key:
                return header.value
        return None

    def get_all(self, key: str) -> list[str]:
        """Return every value of headers named *key*, in document order."""
        key = key.lower()
        return [header.value for header in self.headers if header.key == key]


@dataclass(frozen=True)
class PlainSection:
    """Raw body content with no further structure recognised."""

    body: bytes

    def walk(self) -> Iterator[Section]:
        yield self

    def render(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class MultipartSection(_HeaderLookup):
    """A header block plus the child sections split out of its body."""

    headers: tuple[Header, ...] = ()
    body: tuple[Section, ...] = ()

    def walk(self) -> Iterator[Section]:
        """Yield this section and then every descendant, depth first."""
        yield self
        for child in self.body:
            yield from child.walk()

    def render(self) -> str:
        parts = [f"{render_headers(self.headers)}\n{SECTION_RULE}\n"]
        for child in self.body:
            parts.append(f"\n{child.render()}\n")
        parts.append(SECTION_RULE)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class EmptySection:
    """Leftover boundary terminator with no content."""

    def walk(self) -> Iterator[Section]:
        yield self

    def render(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.render()


EMPTY = EmptySection()

Section = PlainSection | MultipartSection | EmptySection


@dataclass(frozen=True)
class Message(_HeaderLookup):
    """Root of a parsed document: top-level headers and sections.

    Multipart messages usually end with an :class:`EmptySection` produced
    by the closing boundary marker.
    """

    headers: tuple[Header, ...] = ()
    sections: tuple[Section, ...] = ()

    def walk(self) -> Iterator[Section]:
        """Yield every section of the tree, depth first."""
        for section in self.sections:
            yield from section.walk()

    def render(self) -> str:
        """Human-readable dump for diagnostics; not a round-trippable format."""
        parts = [f"{MESSAGE_RULE}\n{render_headers(self.headers)}\n{MESSAGE_RULE}\n"]
        for section in self.sections:
            parts.append(f"{section.render()}\n{MESSAGE_RULE}\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()
