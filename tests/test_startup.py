from datetime import timedelta

import pytest

from zettelstore.meta import Meta
from zettelstore.startup import StartupConfig, calc_secret
from zettelstore.version import Version
from zettelstore.zettel import INVALID_ZETTEL_ID, ZettelID

OWNER = "20200310195100"
VERSION = Version("Zettelstore", "unknown", "host", "3.10", "linux", "amd64")


def make_cfg(**pairs):
    cfg = Meta()
    for key, value in pairs.items():
        cfg.set(key.replace("_", "-"), value)
    return cfg


def test_without_owner_no_auth():
    conf = StartupConfig.from_meta(make_cfg(), VERSION)
    assert conf.with_auth is False
    assert conf.owner == INVALID_ZETTEL_ID
    assert conf.url_prefix == "/"
    assert conf.readonly is False
    assert conf.secret == b""


def test_invalid_owner_no_auth():
    conf = StartupConfig.from_meta(make_cfg(owner="abc"), VERSION)
    assert conf.with_auth is False


def test_readonly_and_prefix():
    conf = StartupConfig.from_meta(make_cfg(readonly="true", url_prefix="/z/"), VERSION)
    assert conf.readonly is True
    assert conf.url_prefix == "/z/"


def test_with_owner_defaults():
    conf = StartupConfig.from_meta(make_cfg(owner=OWNER), VERSION)
    assert conf.with_auth is True
    assert conf.owner == ZettelID(20200310195100)
    assert conf.secure_cookie() is True
    assert conf.persistent_cookie is False
    assert conf.token_lifetime() == (timedelta(hours=1), timedelta(minutes=10))
    assert len(conf.secret) == 16


def test_cookie_flags():
    conf = StartupConfig.from_meta(
        make_cfg(owner=OWNER, insecure_cookie="true", persistent_cookie="yes"), VERSION
    )
    assert conf.secure_cookie() is False
    assert conf.persistent_cookie is True


@pytest.mark.parametrize(
    "html, api, expected",
    [
        ("5", "5", (timedelta(minutes=5), timedelta(minutes=5))),
        ("0", "0", (timedelta(minutes=1), timedelta(0))),
        ("100000", "120", (timedelta(days=30), timedelta(hours=1))),
        ("abc", "-5", (timedelta(hours=1), timedelta(minutes=10))),
        ("", "", (timedelta(hours=1), timedelta(minutes=10))),
    ],
)
def test_token_lifetimes(html, api, expected):
    cfg = make_cfg(owner=OWNER, token_lifetime_html=html, token_lifetime_api=api)
    assert StartupConfig.from_meta(cfg, VERSION).token_lifetime() == expected


def test_secret_of_nothing_is_fnv_offset_basis():
    empty = Version("", "", "", "", "", "")
    assert calc_secret(Meta(), empty) == bytes.fromhex("6c62272e07bb014262b821756295c58d")


def test_secret_deterministic_and_depends_on_inputs():
    base = calc_secret(Meta(), VERSION)
    assert calc_secret(Meta(), VERSION) == base
    assert calc_secret(make_cfg(secret="secret"), VERSION) != base
    other = Version("Zettelstore", "v2", "host", "3.10", "linux", "amd64")
    assert calc_secret(Meta(), other) != base


def test_secret_used_in_startup():
    cfg = make_cfg(owner=OWNER, secret="secret")
    assert StartupConfig.from_meta(cfg, VERSION).secret == calc_secret(cfg, VERSION)