"""Application configuration read from an env file and the process environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from fractions import Fraction
from pathlib import Path

from dotenv import dotenv_values


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is incomplete."""


@dataclass(frozen=True)
class PostgresConfig:
    url: str


@dataclass(frozen=True)
class RpcConfig:
    host: str
    port: str

    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class WebConfig:
    host: str
    port: str

    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class AppConfig:
    timeout: timedelta
    postgres: PostgresConfig
    rpc: RpcConfig
    web: WebConfig
    log_level: str = "DEBUG"


_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_COMPONENT = r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"([-+]?)((?:{_COMPONENT})+)")
_COMPONENT_RE = re.compile(_COMPONENT)


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"1.5h"`` or ``"2h45m"``."""
    match = _DURATION_RE.fullmatch(value)
    if match is None:
        if value.lstrip("+-") == "0":
            return timedelta(0)
        raise ValueError(f'time: invalid duration "{value}"')
    sign, body = match.group(1), match.group(2)
    total = sum(
        Fraction(number) * _UNIT_NANOSECONDS[unit]
        for number, unit in _COMPONENT_RE.findall(body)
    )
    if sign == "-":
        total = -total
    return timedelta(microseconds=int(total / 1000))


def init_config(env_file: str | os.PathLike[str] = ".env",
                environ: Mapping[str, str] | None = None) -> AppConfig:
    """Read the configuration; values in the env file override the environment."""
    path = Path(env_file)
    if not path.is_file():
        raise ConfigError(f"config file {path} not found")

    values = dict(os.environ if environ is None else environ)
    values.update({key: val for key, val in dotenv_values(path).items() if val is not None})

    def required(name: str) -> str:
        if name not in values:
            raise ConfigError(f'field "{name}" is required but the value is not provided')
        return values[name]

    log_level = values.get("LOG_LEVEL", "DEBUG")
    raw_timeout = required("TIMEOUT")
    try:
        timeout = parse_duration(raw_timeout)
    except ValueError as exc:
        raise ConfigError(f"parsing TIMEOUT: {exc}") from exc

    return AppConfig(
        log_level=log_level,
        timeout=timeout,
        postgres=PostgresConfig(url=required("POSTGRES_URL")),
        rpc=RpcConfig(host=required("RPC_HOST"), port=required("RPC_PORT")),
        web=WebConfig(host=required("WEB_HOST"), port=required("WEB_PORT")),
    )