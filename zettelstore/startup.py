"""Configuration fixed at program start."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable

from .meta import Meta
from .version import Version
from .zettel import INVALID_ZETTEL_ID, InvalidZettelIDError, ZettelID, parse_zettel_id

_FNV128_OFFSET = 0x6C62272E07BB014262B821756295C58D
_FNV128_PRIME = 0x0000000001000000000000000000013B
_MASK128 = (1 << 128) - 1
_MAX_UINT64 = (1 << 64) - 1


def _fnv1_128(chunks: Iterable[bytes]) -> bytes:
    value = _FNV128_OFFSET
    for chunk in chunks:
        for byte in chunk:
            value = (value * _FNV128_PRIME) & _MASK128
            value ^= byte
    return value.to_bytes(16, "big")


def calc_secret(cfg: Meta, version: Version) -> bytes:
    """Derive the application secret from the configuration and version."""
    parts = []
    secret = cfg.get("secret")
    if secret is not None:
        parts.append(secret)
    parts.extend(
        (
            version.prog,
            version.build,
            version.hostname,
            version.runtime_version,
            version.os,
            version.arch,
        )
    )
    return _fnv1_128(p.encode("utf-8") for p in parts)


def _get_duration(
    cfg: Meta, key: str, default: timedelta, minimum: timedelta, maximum: timedelta
) -> timedelta:
    text = cfg.get(key)
    if text and text.isascii() and text.isdigit():
        minutes = int(text)
        if minutes <= _MAX_UINT64:
            value = timedelta(minutes=min(minutes, 10**9))
            return max(minimum, min(value, maximum))
    return default


@dataclass(frozen=True)
class StartupConfig:
    """Settings read once from the startup configuration."""

    readonly: bool = False
    url_prefix: str = "/"
    insecure_cookie: bool = False
    persistent_cookie: bool = False
    owner: ZettelID = INVALID_ZETTEL_ID
    with_auth: bool = False
    secret: bytes = b""
    html_lifetime: timedelta = timedelta(0)
    api_lifetime: timedelta = timedelta(0)

    @classmethod
    def from_meta(cls, cfg: Meta, version: Version) -> StartupConfig:
        """Build the startup settings from configuration metadata."""
        readonly = cfg.get_bool("readonly")
        url_prefix = cfg.get_default("url-prefix", "/")
        owner_text = cfg.get("owner")
        owner = INVALID_ZETTEL_ID
        if owner_text is not None:
            try:
                owner = parse_zettel_id(owner_text)
            except InvalidZettelIDError:
                owner = INVALID_ZETTEL_ID
        if owner == INVALID_ZETTEL_ID:
            return cls(readonly=readonly, url_prefix=url_prefix)
        return cls(
            readonly=readonly,
            url_prefix=url_prefix,
            insecure_cookie=cfg.get_bool("insecure-cookie"),
            persistent_cookie=cfg.get_bool("persistent-cookie"),
            owner=owner,
            with_auth=True,
            secret=calc_secret(cfg, version),
            html_lifetime=_get_duration(
                cfg,
                "token-lifetime-html",
                timedelta(hours=1),
                timedelta(minutes=1),
                timedelta(days=30),
            ),
            api_lifetime=_get_duration(
                cfg,
                "token-lifetime-api",
                timedelta(minutes=10),
                timedelta(0),
                timedelta(hours=1),
            ),
        )

    def secure_cookie(self) -> bool:
        """Return True if cookies should be set in secure mode."""
        return not self.insecure_cookie

    def token_lifetime(self) -> tuple[timedelta, timedelta]:
        """Return the token lifetimes for HTML and API access."""
        return self.html_lifetime, self.api_lifetime