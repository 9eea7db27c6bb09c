"""References from zettel content to other zettel or external material."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from urllib.parse import SplitResult, urlsplit

from .zettel import InvalidZettelIDError, parse_zettel_id

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_TAIL = frozenset("0123456789+-.")


class RefState(IntEnum):
    """State of a reference."""

    INVALID = 0
    ZETTEL = 1
    ZETTEL_FOUND = 2
    ZETTEL_BROKEN = 3
    MATERIAL = 4


@dataclass
class Reference:
    """A reference to a zettel or to external material."""

    url: SplitResult | None
    value: str
    state: RefState

    def __str__(self) -> str:
        if self.url is not None:
            return self.url.geturl()
        return self.value

    def is_valid(self) -> bool:
        """Return True if the reference is valid."""
        return self.state != RefState.INVALID

    def is_zettel(self) -> bool:
        """Return True if the reference points to a local zettel."""
        return self.state in (
            RefState.ZETTEL,
            RefState.ZETTEL_FOUND,
            RefState.ZETTEL_BROKEN,
        )

    def is_material(self) -> bool:
        """Return True if the reference points to external material."""
        return self.state == RefState.MATERIAL


def _split_scheme(text: str) -> tuple[str | None, str]:
    for i, ch in enumerate(text):
        if ch.isascii() and ch.isalpha():
            continue
        if ch in _SCHEME_TAIL:
            if i == 0:
                return None, text
            continue
        if ch == ":":
            if i == 0:
                raise ValueError("missing protocol scheme")
            return text[:i], text[i + 1 :]
        return None, text
    return None, text


def _parse_url(text: str) -> SplitResult:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
        raise ValueError("invalid control character in URL")
    if _BAD_ESCAPE_RE.search(text):
        raise ValueError("invalid URL escape")
    scheme, rest = _split_scheme(text.split("#", 1)[0])
    if scheme is None:
        path = rest.split("?", 1)[0]
        if not path.startswith("/") and ":" in path.split("/", 1)[0]:
            raise ValueError("first path segment in URL cannot contain colon")
    parts = urlsplit(text)
    # Accessing the port validates it.
    _ = parts.port
    return parts


def parse_reference(s: str) -> Reference:
    """Parse a string into a reference."""
    if not s:
        return Reference(None, s, RefState.INVALID)
    try:
        parse_zettel_id(s)
    except InvalidZettelIDError:
        pass
    else:
        return Reference(None, s, RefState.ZETTEL)
    try:
        parts = _parse_url(s)
    except ValueError:
        return Reference(None, s, RefState.INVALID)
    return Reference(parts, s, RefState.MATERIAL)