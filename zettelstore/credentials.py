"""Hashing and checking of user credentials."""

from __future__ import annotations

import bcrypt

from .zettel import ZettelID

_COST = 10
_MAX_BCRYPT_INPUT = 72


def _full_credential(zid: ZettelID, ident: str, credential: str) -> bytes:
    full = f"{ZettelID(zid).format()} {ident} {credential}".encode("utf-8")
    return full[:_MAX_BCRYPT_INPUT]


def hash_credential(zid: ZettelID, ident: str, credential: str) -> str:
    """Return a bcrypt hash of the credential bound to zettel id and ident."""
    salt = bcrypt.gensalt(rounds=_COST, prefix=b"2a")
    return bcrypt.hashpw(_full_credential(zid, ident, credential), salt).decode("ascii")


def compare_hash_and_credential(
    hashed_credential: str, zid: ZettelID, ident: str, credential: str
) -> bool:
    """Return True if the hash matches; raise ValueError for a malformed hash."""
    return bcrypt.checkpw(
        _full_credential(zid, ident, credential), hashed_credential.encode("ascii")
    )