"""
Game configuration.

Values come from TERMSNAKE_* environment variables (a local .env file is
loaded first via python-dotenv); CLI flags override them.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from termsnake.domain.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_POLL_MS,
    DEFAULT_TICK_MS,
    DEFAULT_WIDTH,
    EDGE_POLICIES,
    INITIAL_SNAKE,
    WRAP,
)

ENV_PREFIX = "TERMSNAKE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_ms: int = DEFAULT_TICK_MS
    poll_ms: int = DEFAULT_POLL_MS
    edge_policy: str = WRAP
    reversal_guard: bool = True
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000

    @property
    def poll_seconds(self) -> float:
        return self.poll_ms / 1000

    def validate(self) -> "GameConfig":
        """Return self, or raise ValueError describing the first bad value."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board size must be positive, got {self.width}x{self.height}")
        if self.width < len(INITIAL_SNAKE) or self.width * self.height <= len(INITIAL_SNAKE):
            raise ValueError(
                f"Board {self.width}x{self.height} is too small for the starting snake and a fruit"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_ms}ms")
        if self.poll_ms <= 0:
            raise ValueError(f"Poll timeout must be positive, got {self.poll_ms}ms")
        if self.edge_policy not in EDGE_POLICIES:
            allowed = ", ".join(sorted(EDGE_POLICIES))
            raise ValueError(f"Unknown edge policy '{self.edge_policy}'. Use one of: {allowed}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        return self


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got '{raw}'") from None


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got '{raw}'")


def config_from_env(environ: Mapping[str, str]) -> GameConfig:
    """Build a GameConfig from TERMSNAKE_* entries in environ."""

    def get(name: str) -> Optional[str]:
        raw = environ.get(ENV_PREFIX + name)
        if raw is None or raw.strip() == "":
            return None
        return raw.strip()

    values: dict = {}
    for name, field in (("WIDTH", "width"), ("HEIGHT", "height"),
                        ("TICK_MS", "tick_ms"), ("POLL_MS", "poll_ms"),
                        ("SEED", "seed")):
        raw = get(name)
        if raw is not None:
            values[field] = _parse_int(name, raw)

    raw = get("EDGE_POLICY")
    if raw is not None:
        values["edge_policy"] = raw.lower()

    raw = get("REVERSAL_GUARD")
    if raw is not None:
        values["reversal_guard"] = _parse_bool("REVERSAL_GUARD", raw)

    raw = get("LOG_LEVEL")
    if raw is not None:
        values["log_level"] = raw.upper()

    raw = get("LOG_FILE")
    if raw is not None:
        values["log_file"] = raw

    return GameConfig(**values)


def load_config(environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> GameConfig:
    """
    Load configuration from the environment and apply overrides.

    Args:
        environ: Mapping to read from; defaults to os.environ after loading .env
        **overrides: GameConfig fields to force; None values are ignored

    Returns:
        A validated GameConfig.

    Raises:
        ValueError: if any value is malformed or out of range
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config = config_from_env(environ)
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        config = replace(config, **overrides)
    return config.validate()
