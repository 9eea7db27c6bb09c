import time
from datetime import timedelta

import jwt
import pytest

from zettelstore.authtoken import (
    EXPIRED,
    INVALID,
    NO_IDENT,
    NO_USER,
    NO_ZID,
    OTHER_KIND,
    TokenError,
    TokenKind,
    check_token,
    get_token,
)
from zettelstore.meta import Meta
from zettelstore.zettel import ZettelID

SECRET = b"secret"
USER_ZID = ZettelID(20200101000000)


def _user(role="user", ident="alice"):
    meta = Meta(USER_ZID)
    if role is not None:
        meta.set("role", role)
    if ident is not None:
        meta.set("ident", ident)
    return meta


def test_round_trip():
    token = get_token(_user(), timedelta(hours=1), TokenKind.HTML, SECRET)
    data = check_token(token, TokenKind.HTML, SECRET)
    assert data.ident == "alice"
    assert data.zid == USER_ZID
    assert data.token == token
    assert data.expires - data.issued == timedelta(hours=1)


def test_wrong_kind():
    token = get_token(_user(), timedelta(hours=1), TokenKind.JSON, SECRET)
    with pytest.raises(TokenError) as info:
        check_token(token, TokenKind.HTML, SECRET)
    assert info.value.reason == OTHER_KIND


def test_no_user_role():
    with pytest.raises(TokenError) as info:
        get_token(_user(role="zettel"), timedelta(hours=1), TokenKind.HTML, SECRET)
    assert info.value.reason == NO_USER


def test_missing_ident():
    with pytest.raises(TokenError) as info:
        get_token(_user(ident=None), timedelta(hours=1), TokenKind.HTML, SECRET)
    assert info.value.reason == NO_IDENT


def test_expired():
    token = get_token(_user(), timedelta(minutes=-5), TokenKind.HTML, SECRET)
    with pytest.raises(TokenError) as info:
        check_token(token, TokenKind.HTML, SECRET)
    assert info.value.reason == EXPIRED


def test_wrong_secret():
    token = get_token(_user(), timedelta(hours=1), TokenKind.HTML, SECRET)
    with pytest.raises(TokenError) as info:
        check_token(token, TokenKind.HTML, b"placeholder")
    assert info.value.reason == INVALID


def test_garbage_token():
    with pytest.raises(TokenError) as info:
        check_token(b"not-a-token", TokenKind.HTML, SECRET)
    assert info.value.reason == INVALID


def test_missing_zid():
    raw = jwt.encode(
        {"sub": "alice", "exp": int(time.time()) + 3600, "_tk": 2},
        SECRET,
        algorithm="HS512",
    )
    with pytest.raises(TokenError) as info:
        check_token(raw, TokenKind.HTML, SECRET)
    assert info.value.reason == NO_ZID


def test_missing_kind():
    raw = jwt.encode(
        {"sub": "alice", "exp": int(time.time()) + 3600, "zid": USER_ZID.format()},
        SECRET,
        algorithm="HS512",
    )
    with pytest.raises(TokenError) as info:
        check_token(raw, TokenKind.HTML, SECRET)
    assert info.value.reason == OTHER_KIND


def test_missing_subject():
    raw = jwt.encode(
        {"exp": int(time.time()) + 3600, "zid": USER_ZID.format(), "_tk": 2},
        SECRET,
        algorithm="HS512",
    )
    with pytest.raises(TokenError) as info:
        check_token(raw, TokenKind.HTML, SECRET)
    assert info.value.reason == NO_IDENT


def test_missing_expiry_counts_as_expired():
    raw = jwt.encode(
        {"sub": "alice", "zid": USER_ZID.format(), "_tk": 2},
        SECRET,
        algorithm="HS512",
    )
    with pytest.raises(TokenError) as info:
        check_token(raw, TokenKind.HTML, SECRET)
    assert info.value.reason == EXPIRED