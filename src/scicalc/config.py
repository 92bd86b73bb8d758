"""
Runtime settings for the calculator engine and its front-ends.

Values come from SCICALC_* environment variables, falling back to the
defaults below.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .calc_types import AngleMode
from .display import DISPLAY_MAX_LENGTH, DISPLAY_PRECISION

ENV_PREFIX = "SCICALC_"


@dataclass(slots=True)
class CalculatorSettings:
    display_max_length: int = DISPLAY_MAX_LENGTH
    display_precision: int = DISPLAY_PRECISION
    default_angle_mode: AngleMode = AngleMode.DEGREES
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.display_max_length < 1:
            raise ValueError("display_max_length must be positive")
        if not 1 <= self.display_precision <= 100:
            raise ValueError("display_precision must be between 1 and 100")
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}")
        self.default_angle_mode = AngleMode(self.default_angle_mode)
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorSettings":
        """
        Build settings from the environment.

        Args:
            environ: Mapping to read instead of ``os.environ`` (tests)

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def read_int(name: str, default: int) -> int:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None

        return cls(
            display_max_length=read_int("DISPLAY_MAX_LENGTH", defaults.display_max_length),
            display_precision=read_int("DISPLAY_PRECISION", defaults.display_precision),
            default_angle_mode=AngleMode(
                env.get(ENV_PREFIX + "ANGLE_MODE", defaults.default_angle_mode.value).lower()
            ),
            host=env.get(ENV_PREFIX + "HOST", defaults.host),
            port=read_int("PORT", defaults.port),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
