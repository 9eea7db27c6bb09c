"""Command line interface."""

from __future__ import annotations

import argparse
import functools
import getpass
import json
import sys
from datetime import timedelta
from pathlib import Path
from typing import Optional, Sequence

from .commands import Command, CommandError, CommandRegistry
from .credentials import hash_credential
from .meta import Meta, parse_meta
from .startup import StartupConfig
from .version import Version, make_version
from .zettel import INVALID_ZETTEL_ID, InvalidZettelIDError, parse_zettel_id

PROG_NAME = "Zettelstore"
DEF_CONFIG_FILE = ".zscfg"
_BUILD_VERSION = ""
_DEFAULT_LISTEN_ADDR = "127.0.0.1:23123"


def format_version(version: Version) -> str:
    """Return the one-line description of a version."""
    return (
        f"{version.prog} ({version.build}/{version.runtime_version}) "
        f"running on {version.hostname} ({version.os}/{version.arch})"
    )


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _format_duration(duration: timedelta) -> str:
    total = int(duration.total_seconds())
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _uint(text: str) -> int:
    value = int(text)
    if value < 0:
        raise ValueError(text)
    return value


def _run_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", metavar="FILE", help="configuration file")
    parser.add_argument("-p", type=_uint, metavar="PORT", help="port number")
    parser.add_argument("-d", metavar="DIR", help="zettel directory")
    parser.add_argument(
        "-r", action="store_true", default=argparse.SUPPRESS,
        help="system-wide read-only mode",
    )
    parser.add_argument(
        "-v", action="store_true", default=argparse.SUPPRESS, help="verbose mode"
    )


def _flag_text(value: object) -> str:
    text = str(value)
    return text.lower() if isinstance(value, bool) else text


def _read_config_file(path: str) -> Meta:
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return Meta(INVALID_ZETTEL_ID)
    meta, _ = parse_meta(INVALID_ZETTEL_ID, text)
    return meta


def build_config(command_name: str, argv: Sequence[str]) -> Meta:
    """Parse the flags of a command and build its configuration metadata."""
    command = _registry().get(command_name)
    if command is None:
        raise CommandError(f"Unknown command {_quote(command_name)}")
    ns = command.parser.parse_args(list(argv))
    given = vars(ns)
    cfg = _read_config_file(given.get("c", DEF_CONFIG_FILE))

    if "p" in given:
        cfg.set("listen-addr", "127.0.0.1:" + _flag_text(given["p"]))
    if "d" in given:
        cfg.set("place-1-uri", "dir://" + _flag_text(given["d"]))
    if "r" in given:
        cfg.set("readonly", _flag_text(given["r"]))
    if "v" in given:
        cfg.set("verbose", _flag_text(given["v"]))
    if "t" in given:
        cfg.set("target-format", _flag_text(given["t"]))

    if cfg.get("listen-addr") is None:
        cfg.set("listen-addr", _DEFAULT_LISTEN_ADDR)
    if cfg.get("readonly") is None:
        cfg.set("readonly", "false")
    if cfg.get("verbose") is None:
        cfg.set("verbose", "false")
    prefix = cfg.get("url-prefix")
    if not prefix or not prefix.startswith("/") or not prefix.endswith("/"):
        cfg.set("url-prefix", "/")

    for number, arg in enumerate(given.get("arguments", []), start=1):
        cfg.set(f"arg-{number}", arg)
    cfg.set("command-name", command_name)
    return cfg


def _cmd_version(cfg: Meta) -> int:
    version = make_version(PROG_NAME, _BUILD_VERSION)
    sys.stdout.write(format_version(version) + "\n")
    return 0


def _cmd_config(cfg: Meta) -> int:
    version = make_version(PROG_NAME, _BUILD_VERSION)
    startup = StartupConfig.from_meta(cfg, version)
    lines = [
        format_version(version),
        "Stores",
        f"  Read only         = {str(startup.readonly).lower()}",
        "Web",
        f"  Listen Addr       = {_quote(cfg.get_default('listen-addr', '???'))}",
        f"  URL prefix        = {_quote(startup.url_prefix)}",
    ]
    if startup.with_auth:
        html_lifetime, api_lifetime = startup.token_lifetime()
        lines += [
            "Auth",
            f"  Owner             = {startup.owner.format()}",
            f"  Secure cookie     = {str(startup.secure_cookie()).lower()}",
            f"  Persistent cookie = {str(startup.persistent_cookie).lower()}",
            f"  HTML lifetime     = {_format_duration(html_lifetime)}",
            f"  API lifetime      = {_format_duration(api_lifetime)}",
        ]
    print("\n".join(lines))
    return 0


def _read_password(prompt: str) -> str:
    return getpass.getpass(prompt=f"{prompt}: ", stream=sys.stderr)


def _cmd_password(cfg: Meta) -> int:
    ident = cfg.get("arg-1")
    if ident is None:
        print("User name missing", file=sys.stderr)
        return 2
    zid_text = cfg.get("arg-2")
    if zid_text is None:
        print("Zettel identification missing", file=sys.stderr)
        return 2
    try:
        zid = parse_zettel_id(zid_text)
    except InvalidZettelIDError:
        print(
            f"Given zettel identification is not valid: {_quote(zid_text)}",
            file=sys.stderr,
        )
        return 2
    first = _read_password("Password")
    again = _read_password("   Again")
    if first != again:
        print("Passwords differ!", file=sys.stderr)
        return 2
    hashed = hash_credential(zid, ident, first)
    print(f"ident: {ident}\ncred: {hashed}")
    return 0


def default_registry() -> CommandRegistry:
    """Return a registry holding all available commands."""
    registry = CommandRegistry()

    def _cmd_help(cfg: Meta) -> int:
        print("Available commands:")
        for name in registry.names():
            print(f"- {_quote(name)}")
        return 0

    registry.register(Command("help", _cmd_help))
    registry.register(Command("version", _cmd_version))
    registry.register(Command("config", _cmd_config, flags=_run_flags))
    registry.register(Command("password", _cmd_password))
    return registry


@functools.lru_cache(maxsize=None)
def _registry() -> CommandRegistry:
    return default_registry()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a command and return its exit code; without arguments list commands."""
    args = list(sys.argv[1:] if argv is None else argv)
    name, rest = (args[0], args[1:]) if args else ("help", [])
    command = _registry().get(name)
    if command is None:
        print(f"Unknown command {_quote(name)}", file=sys.stderr)
        return 1
    try:
        cfg = build_config(name, rest)
    except CommandError as err:
        print(f"{name}: unable to parse flags: {rest} {err}", file=sys.stderr)
        return 1
    try:
        return command.func(cfg)
    except Exception as err:  # report any failure of the command itself
        print(f"{name}: {err}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())