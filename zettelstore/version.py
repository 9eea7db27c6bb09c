"""Description of the running software version."""

from __future__ import annotations

import platform
import socket
import sys
from dataclasses import dataclass

_UNKNOWN_BUILD = "unknown"
_UNKNOWN_HOST = "*unknown host*"


@dataclass(frozen=True)
class Version:
    """All elements of a software version."""

    prog: str
    build: str
    hostname: str
    runtime_version: str
    os: str
    arch: str


def make_version(prog: str, build: str) -> Version:
    """Describe the running program with the given name and build."""
    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = _UNKNOWN_HOST
    return Version(
        prog=prog,
        build=build or _UNKNOWN_BUILD,
        hostname=hostname,
        runtime_version=platform.python_version(),
        os=sys.platform,
        arch=platform.machine(),
    )