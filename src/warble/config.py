"""Runtime configuration.

ProxyConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from warble.errors import ConfigurationError

BACKENDS = ("simulated", "http")


@dataclass(frozen=True, slots=True)
class ProxyConfig:
    """Service proxy selection and tuning. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ProxyConfig(backend="http", base_url="http://localhost:8000")
    """

    # Which implementation create_proxy() builds
    backend: str = "simulated"

    # HTTP backend
    base_url: str = "http://127.0.0.1:8000"
    timeout: float = 10.0

    # Simulated backend — (min, max) seconds of random delay, None = no delay
    latency: tuple[float, float] | None = None
    seed: int | None = None

    # Logging
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            msg = f"Unknown backend {self.backend!r}. Expected one of: {', '.join(BACKENDS)}"
            raise ConfigurationError(msg)
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout!r}"
            raise ConfigurationError(msg)
        if self.latency is not None:
            low, high = self.latency
            if low < 0 or high < low:
                msg = f"latency must satisfy 0 <= min <= max, got {self.latency!r}"
                raise ConfigurationError(msg)
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            msg = f"Unknown log level {self.log_level!r}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ProxyConfig:
        """Build a config from ``WARBLE_*`` environment variables.

        Unset variables keep their defaults. ``WARBLE_LATENCY`` is
        ``"min,max"`` in seconds.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if backend := env.get("WARBLE_BACKEND"):
            kwargs["backend"] = backend.strip().lower()
        if base_url := env.get("WARBLE_BASE_URL"):
            kwargs["base_url"] = base_url.rstrip("/")
        if timeout := env.get("WARBLE_TIMEOUT"):
            kwargs["timeout"] = _parse_float("WARBLE_TIMEOUT", timeout)
        if latency := env.get("WARBLE_LATENCY"):
            kwargs["latency"] = parse_latency(latency)
        if log_level := env.get("WARBLE_LOG_LEVEL"):
            kwargs["log_level"] = log_level.strip().lower()

        return cls(**kwargs)  # type: ignore[arg-type]


def parse_latency(value: str) -> tuple[float, float]:
    """Parse ``"min,max"`` (or a single ``"n"``) into a latency range."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) == 1:
        seconds = _parse_float("WARBLE_LATENCY", parts[0])
        return (seconds, seconds)
    if len(parts) != 2:
        msg = f"WARBLE_LATENCY must be 'min,max', got {value!r}"
        raise ConfigurationError(msg)
    return (
        _parse_float("WARBLE_LATENCY", parts[0]),
        _parse_float("WARBLE_LATENCY", parts[1]),
    )


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        msg = f"{name} must be a number, got {raw!r}"
        raise ConfigurationError(msg) from None
