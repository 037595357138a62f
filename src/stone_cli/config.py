"""Environment-driven settings for the stone CLI."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_VERIFIER_BIN = "cpu_air_verifier"


class SettingsError(ValueError):
    """Raised when an environment setting has an unusable value."""


def parse_timeout(raw: Optional[str], source: str = "STONE_VERIFIER_TIMEOUT") -> Optional[float]:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise SettingsError(f"{source} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise SettingsError(f"{source} must be positive, got {raw!r}")
    return value


@dataclass
class Settings:
    """Runtime settings; CLI options override these.

    The verifier timeout is kept as the raw environment string and only
    parsed when a command needs it.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    verifier_bin: str = DEFAULT_VERIFIER_BIN
    verifier_timeout_raw: Optional[str] = None

    @property
    def verifier_timeout(self) -> Optional[float]:
        """Seconds to wait for the verifier; None waits forever."""
        return parse_timeout(self.verifier_timeout_raw)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("STONE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            verifier_bin=env.get("STONE_VERIFIER_BIN", DEFAULT_VERIFIER_BIN),
            verifier_timeout_raw=env.get("STONE_VERIFIER_TIMEOUT"),
        )
