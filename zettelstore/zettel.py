"""Zettel identifiers and the zettel data object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta import Meta

_MAX_ZETTEL_ID = 99999999999999
_ID_LENGTH = 14


class InvalidZettelIDError(ValueError):
    """Raised when a string is not a valid zettel identifier."""


class ZettelID(int):
    """Numeric zettel identifier, usually a timestamp YYYYMMDDHHmmSS."""

    def format(self) -> str:
        """Return the identifier as a string of exactly 14 digits."""
        return f"{int(self) % (_MAX_ZETTEL_ID + 1):014d}"

    def is_valid(self) -> bool:
        """Return True if the identifier fits into 14 digits and is not zero."""
        return 0 < self <= _MAX_ZETTEL_ID

    def __repr__(self) -> str:
        return f"ZettelID({int(self)})"


INVALID_ZETTEL_ID = ZettelID(0)

CONFIGURATION_ID = ZettelID(1)
BASE_TEMPLATE_ID = ZettelID(10100)
LOGIN_TEMPLATE_ID = ZettelID(10200)
LIST_TEMPLATE_ID = ZettelID(10300)
DETAIL_TEMPLATE_ID = ZettelID(10401)
INFO_TEMPLATE_ID = ZettelID(10402)
FORM_TEMPLATE_ID = ZettelID(10403)
RENAME_TEMPLATE_ID = ZettelID(10404)
DELETE_TEMPLATE_ID = ZettelID(10405)
ROLES_TEMPLATE_ID = ZettelID(10500)
TAGS_TEMPLATE_ID = ZettelID(10600)
BASE_CSS_ID = ZettelID(20001)
MATERIAL_ICON_ID = ZettelID(30001)
TEMPLATE_ZETTEL_ID = ZettelID(40001)


def parse_zettel_id(s: str) -> ZettelID:
    """Interpret a 14 digit string as a zettel identifier."""
    if len(s) != _ID_LENGTH or not (s.isascii() and s.isdigit()):
        raise InvalidZettelIDError(f"invalid zettel id: {s!r}")
    value = int(s)
    if value == 0:
        raise InvalidZettelIDError(f"zettel id out of range: {s!r}")
    return ZettelID(value)


def new_zettel_id(with_seconds: bool) -> ZettelID:
    """Create a zettel identifier from the current local time."""
    pattern = "%Y%m%d%H%M%S" if with_seconds else "%Y%m%d%H%M00"
    return parse_zettel_id(datetime.now().strftime(pattern))


@dataclass
class Zettel:
    """A zettel: its metadata and its uninterpreted content."""

    meta: Meta
    content: str = ""