"""Signed authentication tokens for users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Optional, Union

import jwt

from .meta import KEY_IDENT, KEY_ROLE, VALUE_ROLE_USER, Meta
from .zettel import InvalidZettelIDError, ZettelID, parse_zettel_id

_ALGORITHM = "HS512"
_DECODE_OPTIONS = {"verify_exp": False, "verify_iat": False, "verify_nbf": False}

NO_USER = "no-user"
NO_IDENT = "no-ident"
OTHER_KIND = "other-kind"
NO_ZID = "no-zid"
EXPIRED = "expired"
INVALID = "invalid"


class TokenKind(IntEnum):
    """Usage a token was requested for."""

    JSON = 1
    HTML = 2


class TokenError(Exception):
    """Raised when a token cannot be created or is not acceptable."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class TokenData:
    """Relevant data of a checked token."""

    token: bytes
    now: datetime
    issued: Optional[datetime]
    expires: datetime
    ident: str
    zid: ZettelID


def _now() -> datetime:
    current = datetime.now(timezone.utc) + timedelta(microseconds=500_000)
    return current.replace(microsecond=0)


def _to_time(value: object) -> Optional[datetime]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def get_token(
    ident: Meta, lifetime: timedelta, kind: TokenKind, secret: bytes
) -> bytes:
    """Create a signed token for the given user zettel."""
    if ident.get(KEY_ROLE) != VALUE_ROLE_USER:
        raise TokenError(NO_USER, "auth: meta is no user")
    subject = ident.get(KEY_IDENT)
    if not subject:
        raise TokenError(NO_IDENT, "auth: missing ident")
    now = _now()
    payload = {
        "sub": subject,
        "exp": int((now + lifetime).timestamp()),
        "iat": int(now.timestamp()),
        "zid": ident.zid.format(),
        "_tk": int(kind),
    }
    encoded = jwt.encode(payload, secret, algorithm=_ALGORITHM)
    if isinstance(encoded, str):
        encoded = encoded.encode("ascii")
    return encoded


def check_token(
    token: Union[bytes, str], kind: TokenKind, secret: bytes
) -> TokenData:
    """Verify a token and return its data; raise TokenError if unacceptable."""
    try:
        claims = jwt.decode(
            token, secret, algorithms=[_ALGORITHM], options=_DECODE_OPTIONS
        )
    except jwt.InvalidTokenError as err:
        raise TokenError(INVALID, f"auth: {err}") from err
    now = _now()
    expires = _to_time(claims.get("exp"))
    if expires is None or expires < now:
        raise TokenError(EXPIRED, "auth: token expired")
    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        raise TokenError(NO_IDENT, "auth: missing ident")
    zid_text = claims.get("zid")
    if not isinstance(zid_text, str):
        raise TokenError(NO_ZID, "auth: missing zettel id")
    try:
        zid = parse_zettel_id(zid_text)
    except InvalidZettelIDError as err:
        raise TokenError(NO_ZID, "auth: missing zettel id") from err
    token_kind = claims.get("_tk")
    if (
        isinstance(token_kind, bool)
        or not isinstance(token_kind, (int, float))
        or int(token_kind) != int(kind)
    ):
        raise TokenError(OTHER_KIND, "auth: wrong token kind")
    raw = token.encode("ascii") if isinstance(token, str) else bytes(token)
    return TokenData(
        token=raw,
        now=now,
        issued=_to_time(claims.get("iat")),
        expires=expires,
        ident=subject,
        zid=zid,
    )