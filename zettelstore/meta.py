"""Zettel metadata: typed key/value pairs and their textual header format."""

from __future__ import annotations

import re
from typing import Callable, NamedTuple, TextIO

from .zettel import (
    INVALID_ZETTEL_ID,
    InvalidZettelIDError,
    ZettelID,
    parse_zettel_id,
)

KEY_ID = "id"
KEY_TITLE = "title"
KEY_TAGS = "tags"
KEY_SYNTAX = "syntax"
KEY_ROLE = "role"
KEY_COPYRIGHT = "copyright"
KEY_CRED = "cred"
KEY_DEFAULT_COPYRIGHT = "default-copyright"
KEY_DEFAULT_LANG = "default-lang"
KEY_DEFAULT_LICENSE = "default-license"
KEY_DEFAULT_ROLE = "default-role"
KEY_DEFAULT_SYNTAX = "default-syntax"
KEY_DEFAULT_TITLE = "default-title"
KEY_ICON_MATERIAL = "icon-material"
KEY_IDENT = "ident"
KEY_LANG = "lang"
KEY_LICENSE = "license"
KEY_SITE_NAME = "site-name"
KEY_START = "start"
KEY_URL = "url"
KEY_USER_ROLE = "user-role"
KEY_VISIBILITY = "visibility"
KEY_YAML_HEADER = "yaml-header"
KEY_ZETTEL_FILE_SYNTAX = "zettel-file-syntax"

VALUE_ROLE_USER = "user"
VALUE_VISIBILITY_OWNER = "owner"
VALUE_VISIBILITY_LOGIN = "login"
VALUE_VISIBILITY_PUBLIC = "public"

META_TYPE_BOOL = "b"
META_TYPE_CRED = "c"
META_TYPE_EMPTY = "e"
META_TYPE_ID = "i"
META_TYPE_STRING = "s"
META_TYPE_TAG_SET = "T"
META_TYPE_URL = "u"
META_TYPE_UNKNOWN = "\0"
META_TYPE_WORD = "w"
META_TYPE_WORD_SET = "W"

_KEY_TYPES = {
    KEY_ID: META_TYPE_ID,
    KEY_TITLE: META_TYPE_STRING,
    KEY_TAGS: META_TYPE_TAG_SET,
    KEY_SYNTAX: META_TYPE_WORD,
    KEY_ROLE: META_TYPE_WORD,
    KEY_COPYRIGHT: META_TYPE_STRING,
    KEY_CRED: META_TYPE_CRED,
    KEY_DEFAULT_COPYRIGHT: META_TYPE_STRING,
    KEY_DEFAULT_LICENSE: META_TYPE_EMPTY,
    KEY_DEFAULT_LANG: META_TYPE_WORD,
    KEY_DEFAULT_ROLE: META_TYPE_WORD,
    KEY_DEFAULT_SYNTAX: META_TYPE_WORD,
    KEY_DEFAULT_TITLE: META_TYPE_STRING,
    KEY_IDENT: META_TYPE_WORD,
    KEY_LANG: META_TYPE_WORD,
    KEY_LICENSE: META_TYPE_EMPTY,
    KEY_SITE_NAME: META_TYPE_STRING,
    KEY_START: META_TYPE_ID,
    KEY_URL: META_TYPE_URL,
    KEY_USER_ROLE: META_TYPE_WORD,
    KEY_VISIBILITY: META_TYPE_WORD,
    KEY_YAML_HEADER: META_TYPE_BOOL,
    KEY_ZETTEL_FILE_SYNTAX: META_TYPE_WORD_SET,
}

_FIRST_KEYS = (KEY_TITLE, KEY_TAGS, KEY_SYNTAX, KEY_ROLE)

_KEY_RE = re.compile(r"[0-9a-z][-0-9a-z]{0,254}")
_HEADER_KEY_RE = re.compile(r"[A-Za-z0-9-]*")
_SPACE_RE = re.compile(r"[^\S\r\n]*")
_EOL_RE = re.compile(r"[\r\n]")
_EDGE_SPACE_RE = re.compile(r"^[^\S\r\n]+|[^\S\r\n]+$")
_YAML_SEP = "---\n"


class FrozenMetaError(RuntimeError):
    """Raised when frozen metadata is modified."""


class MetaPair(NamedTuple):
    """One key/value pair of zettel metadata."""

    key: str
    value: str


def key_is_valid(key: str) -> bool:
    """Return True if the key is a syntactically valid metadata key."""
    return _KEY_RE.fullmatch(key) is not None


def key_type(key: str) -> str:
    """Return the type hint of a key, or META_TYPE_UNKNOWN."""
    return _KEY_TYPES.get(key, META_TYPE_UNKNOWN)


def bool_value(value: str) -> bool:
    """Interpret a metadata value as a boolean."""
    return not value or value[0] not in "0fFnN"


def list_from_value(value: str) -> list[str]:
    """Split a metadata value into its whitespace separated words."""
    return value.split()


class Meta:
    """Metadata of a zettel."""

    def __init__(self, zid: ZettelID = INVALID_ZETTEL_ID) -> None:
        self.zid = ZettelID(zid)
        self.yaml_sep = False
        self._pairs: dict[str, str] = {}
        self._frozen = False

    def clone(self) -> Meta:
        """Return an unfrozen copy of this metadata."""
        result = Meta(self.zid)
        result._pairs = dict(self._pairs)
        result.yaml_sep = self.yaml_sep
        return result

    def type(self, key: str) -> str:
        """Return the type hint of the given key."""
        return key_type(key)

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise FrozenMetaError(f"{operation} on frozen metadata")

    def set(self, key: str, value: str) -> None:
        """Store a value under a key; the 'id' key is ignored."""
        self._check_mutable("set")
        if key != KEY_ID:
            self._pairs[key] = value

    def set_list(self, key: str, values: list[str]) -> None:
        """Store a list of words under a key."""
        self._check_mutable("set_list")
        if key != KEY_ID:
            self._pairs[key] = " ".join(values)

    def freeze(self) -> None:
        """Make the metadata read-only."""
        self._frozen = True

    def is_frozen(self) -> bool:
        """Return True if the metadata is read-only."""
        return self._frozen

    def get(self, key: str) -> str | None:
        """Return the value of a key, or None if it is not stored."""
        if key == KEY_ID:
            return self.zid.format()
        return self._pairs.get(key)

    def get_default(self, key: str, default: str) -> str:
        """Return the value of a key, or the given default."""
        value = self.get(key)
        return default if value is None else value

    def get_bool(self, key: str) -> bool:
        """Return the value of a key as a boolean; False if missing."""
        value = self.get(key)
        return False if value is None else bool_value(value)

    def get_list(self, key: str) -> list[str] | None:
        """Return the value of a key as a word list, or None if missing."""
        value = self.get(key)
        return None if value is None else list_from_value(value)

    def _collect_pairs(self, first: bool) -> list[MetaPair]:
        head = (
            [MetaPair(k, self._pairs[k]) for k in _FIRST_KEYS if k in self._pairs]
            if first
            else []
        )
        rest = sorted(k for k in self._pairs if k not in _FIRST_KEYS)
        return head + [MetaPair(k, self._pairs[k]) for k in rest]

    def pairs(self) -> list[MetaPair]:
        """Return all pairs: title, tags, syntax and role first, then by key."""
        return self._collect_pairs(True)

    def pairs_rest(self) -> list[MetaPair]:
        """Return all pairs except the predefined first keys, ordered by key."""
        return self._collect_pairs(False)

    def _format(self) -> str:
        return "".join(f"{p.key}: {p.value}\n" for p in self.pairs())

    def write(self, stream: TextIO) -> int:
        """Write all pairs as 'key: value' lines; return characters written."""
        text = self._format()
        stream.write(text)
        return len(text)

    def write_as_header(self, stream: TextIO) -> int:
        """Write the metadata plus its separators; return characters written."""
        if self.yaml_sep:
            text = _YAML_SEP + self._format() + _YAML_SEP
        else:
            text = self._format() + "\n"
        stream.write(text)
        return len(text)

    def delete(self, key: str) -> None:
        """Remove a key; the 'id' key is ignored."""
        self._check_mutable("delete")
        if key != KEY_ID:
            self._pairs.pop(key, None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meta):
            return NotImplemented
        return self.zid == other.zid and self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Meta(zid={self.zid.format()}, pairs={self._pairs!r})"


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in "\r\n"


def _add_data(meta: Meta, key: str, value: str) -> None:
    old = meta.get(key)
    if not old:
        meta.set(key, value)
    elif value:
        meta.set(key, f"{old} {value}")


def _add_set(meta: Meta, key: str, value: str, keep: Callable[[str], bool]) -> None:
    elems = {e for e in value.split() if keep(e)}
    if not elems:
        return
    elems.update(e for e in meta.get_list(key) or [] if keep(e))
    meta.set_list(key, sorted(elems))


def add_to_meta(meta: Meta, key: str, value: str) -> None:
    """Add a raw header value to metadata according to the key's type."""
    v = _EDGE_SPACE_RE.sub("", value)
    key = key.lower()
    if not key_is_valid(key) or key == KEY_ID:
        return
    kind = key_type(key)
    if kind == META_TYPE_STRING:
        if v:
            _add_data(meta, key, v)
    elif kind == META_TYPE_TAG_SET:
        _add_set(meta, key, v, lambda s: s.startswith("#"))
    elif kind == META_TYPE_WORD:
        meta.set(key, v.lower())
    elif kind == META_TYPE_WORD_SET:
        _add_set(meta, key, v.lower(), lambda s: True)
    elif kind == META_TYPE_ID:
        try:
            parse_zettel_id(value)
        except InvalidZettelIDError:
            return
        meta.set(key, value)
    else:
        _add_data(meta, key, v)


class _Cursor:
    """Position within the text being parsed; '' marks the end."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def ch(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def peek(self, offset: int = 0) -> str:
        index = self.pos + 1 + offset
        return self.text[index : index + 1]

    def next(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1

    def at_separator(self) -> bool:
        return self.text.startswith("---", self.pos)

    def skip_space(self) -> None:
        self.pos = _SPACE_RE.match(self.text, self.pos).end()

    def skip_to_eol(self) -> None:
        found = _EOL_RE.search(self.text, self.pos)
        self.pos = found.start() if found else len(self.text)

    def eat_eol(self) -> None:
        if self.ch == "\r":
            self.next()
            if self.ch == "\n":
                self.next()
        elif self.ch == "\n":
            self.next()

    def take(self, pattern: re.Pattern[str]) -> str:
        found = pattern.match(self.text, self.pos)
        self.pos = found.end()
        return found.group()


def _parse_header(meta: Meta, cur: _Cursor) -> None:
    key = cur.take(_HEADER_KEY_RE)
    cur.skip_space()
    if cur.ch == ":":
        cur.next()
    parts = []
    while True:
        cur.skip_space()
        start = cur.pos
        cur.skip_to_eol()
        parts.append(cur.text[start : cur.pos])
        cur.eat_eol()
        if not _is_space(cur.ch):
            break
    add_to_meta(meta, key, " ".join(parts))


def parse_meta(zid: ZettelID, text: str) -> tuple[Meta, str]:
    """Parse a metadata header; return the metadata and the remaining text."""
    cur = _Cursor(text)
    if cur.at_separator():
        cur.skip_to_eol()
        cur.eat_eol()
    meta = Meta(zid)
    while True:
        cur.skip_space()
        ch = cur.ch
        if ch == "\r":
            if cur.peek() == "\n":
                cur.next()
            cur.next()
            break
        if ch == "\n":
            cur.next()
            break
        if ch == "":
            break
        if ch == "%":
            cur.skip_to_eol()
            cur.eat_eol()
            continue
        _parse_header(meta, cur)
        if cur.at_separator():
            cur.skip_to_eol()
            cur.eat_eol()
            meta.yaml_sep = True
            break
    return meta, text[cur.pos :]