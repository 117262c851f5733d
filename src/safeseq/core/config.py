import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def canonical_level(value: object) -> Optional[str]:
    """Map a level name or number understood by ``logging`` to its canonical name.

    Aliases resolve to the standard names (``warn`` -> ``WARNING``,
    ``fatal`` -> ``CRITICAL``) and numeric values resolve to the nearest
    standard level at or below them (``"10"`` -> ``DEBUG``). Returns None for
    anything ``logging`` does not know.
    """
    text = str(value).strip().upper()
    if text.lstrip("-").isdigit():
        number = int(text)
    else:
        number = logging.getLevelName(text)
        if not isinstance(number, int):
            return None
    known = [getattr(logging, name) for name in LOG_LEVELS]
    below = [level for level in known if level <= number]
    return logging.getLevelName(max(below) if below else min(known))


class Settings(BaseModel):
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL
    LOG_FORMAT: str = Field(default=DEFAULT_LOG_FORMAT, min_length=1)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = canonical_level(value)
        if level is None:
            raise ValueError(
                f"Unknown log level '{value}'. Expected one of {', '.join(LOG_LEVELS)}."
            )
        return level

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        ``SAFESEQ_LOG_LEVEL`` wins over the generic ``LOG_LEVEL`` and is
        validated strictly. ``LOG_LEVEL`` is shared with other programs, so a
        value ``logging`` does not understand is ignored rather than rejected.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("SAFESEQ_LOG_LEVEL")
        if not level:
            generic = environ.get("LOG_LEVEL")
            if generic and canonical_level(generic) is not None:
                level = generic
        if level:
            values["LOG_LEVEL"] = level
        log_format = environ.get("SAFESEQ_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
