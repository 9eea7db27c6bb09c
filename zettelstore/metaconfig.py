"""Metadata helpers that depend on configuration."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from .meta import (
    KEY_COPYRIGHT,
    KEY_LANG,
    KEY_LICENSE,
    KEY_ROLE,
    KEY_SYNTAX,
    KEY_TITLE,
    KEY_USER_ROLE,
    KEY_VISIBILITY,
    META_TYPE_EMPTY,
    VALUE_VISIBILITY_LOGIN,
    VALUE_VISIBILITY_OWNER,
    VALUE_VISIBILITY_PUBLIC,
    Meta,
)
from .runtime import RuntimeConfig


class Visibility(IntEnum):
    """Values of the 'visibility' key."""

    PUBLIC = 1
    LOGIN = 2
    OWNER = 3


class UserRole(IntEnum):
    """Values of the 'user-role' key."""

    READER = 1
    WRITER = 2


_VISIBILITIES = {
    VALUE_VISIBILITY_PUBLIC: Visibility.PUBLIC,
    VALUE_VISIBILITY_LOGIN: Visibility.LOGIN,
    VALUE_VISIBILITY_OWNER: Visibility.OWNER,
}

_USER_ROLES = {
    "reader": UserRole.READER,
    "writer": UserRole.WRITER,
}

_DEFAULTS: dict[str, Callable[[RuntimeConfig], str]] = {
    KEY_COPYRIGHT: RuntimeConfig.default_copyright,
    KEY_LANG: RuntimeConfig.default_lang,
    KEY_LICENSE: RuntimeConfig.default_license,
    KEY_ROLE: RuntimeConfig.default_role,
    KEY_SYNTAX: RuntimeConfig.default_syntax,
    KEY_TITLE: RuntimeConfig.default_title,
}


def add_default_values(meta: Meta, runtime: RuntimeConfig) -> Meta:
    """Return metadata enriched with default values; the input is not changed."""
    result = meta
    for key, default in _DEFAULTS.items():
        if result.get(key) is not None:
            continue
        if result is meta:
            result = meta.clone()
        value = default(runtime)
        if value or meta.type(key) == META_TYPE_EMPTY:
            result.set(key, value)
    if result is not meta and meta.is_frozen():
        result.freeze()
    return result


def get_syntax(meta: Meta, runtime: RuntimeConfig) -> str:
    """Return the syntax of the metadata, or the configured default."""
    return meta.get(KEY_SYNTAX) or runtime.default_syntax()


def get_lang(meta: Meta, runtime: RuntimeConfig) -> str:
    """Return the language of the metadata, or the configured default."""
    return meta.get(KEY_LANG) or runtime.default_lang()


def get_visibility(meta: Meta) -> Visibility:
    """Return the visibility; 'login' if missing or unknown."""
    return _VISIBILITIES.get(meta.get(KEY_VISIBILITY) or "", Visibility.LOGIN)


def get_user_role(user: Meta) -> UserRole:
    """Return the role of a user zettel; 'reader' if missing or unknown."""
    return _USER_ROLES.get(user.get(KEY_USER_ROLE) or "", UserRole.READER)