"""
Runtime Settings
Environment-driven settings for the profile field codec.

PROFILECRYPT_STRICT      "1" (default) re-raises configuration defects,
                         "0" logs them and treats the field as unset.
PROFILECRYPT_LOG_LEVEL   Level used by configure_logging (default WARNING).
"""

import logging
import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """Profile codec settings (loaded from environment variables)."""

    # Re-raise FieldSpec table defects instead of degrading to None
    strict: bool = True

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build Settings from the environment."""
        strict_raw = os.environ.get("PROFILECRYPT_STRICT", "1").strip().lower()
        return cls(
            strict=strict_raw not in _FALSE_VALUES,
            log_level=os.environ.get("PROFILECRYPT_LOG_LEVEL", "WARNING").strip().upper(),
        )

    def validate(self) -> list[str]:
        """Check the settings. Returns a list of error messages."""
        errors: list[str] = []
        if self.log_level not in _LOG_LEVELS:
            errors.append(f"PROFILECRYPT_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return errors


_settings: Settings | None = None


def get_settings() -> Settings:
    """Process settings, loaded from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure_logging(settings: Settings | None = None) -> None:
    """Install a basic stderr handler at the configured level."""
    settings = settings or get_settings()
    level = settings.log_level if settings.log_level in _LOG_LEVELS else "WARNING"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
