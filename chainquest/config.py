"""Configuration read from the environment."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

_PORT_RE = re.compile(r"\+?[0-9]+")


def _parse_port(text: Optional[str]) -> Optional[int]:
    if text is None or not _PORT_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 0xFFFF else None


@dataclass
class EnvConfig:
    """Server address taken from CQ_HOST and CQ_PORT."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvConfig":
        env = os.environ if environ is None else environ
        host = env.get("CQ_HOST", DEFAULT_HOST)
        port = _parse_port(env.get("CQ_PORT"))
        return cls(host=host, port=DEFAULT_PORT if port is None else port)


@dataclass
class NetConfig:
    """Address the multiplayer client connects to."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def net_config_from_env(environ: Optional[Mapping[str, str]] = None) -> NetConfig:
    """Build the network configuration from the environment."""
    cfg = EnvConfig.from_env(environ)
    return NetConfig(host=cfg.host, port=cfg.port)