import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .config_manager import ConfigManager
from .constants import ALGORITHM_ALL, ALGORITHM_CHOICES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    # Algorithm used by the CLI when --algorithm is not given
    default_algorithm: str = Field(
        default=ALGORITHM_ALL,
        description="One of euclid, consecutive, middle or all (cross-check)"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # The middle school procedure sieves up to each input, so cap what the CLI hands it
    max_sieve_bound: int = Field(
        default=10_000_000, ge=2,
        description="Largest magnitude the CLI will factor, or count down from with consecutive checking"
    )

    @validator("default_algorithm")
    def validate_default_algorithm(cls, v):
        v = v.lower()
        if v not in ALGORITHM_CHOICES:
            raise ValueError(
                f"default_algorithm must be one of {', '.join(ALGORITHM_CHOICES)}, got {v}"
            )
        return v

    @validator("log_level")
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v}")
        return v

    class Config:
        env_prefix = "GCD_"
        env_file = ".env"
        validate_assignment = True


@lru_cache()
def get_settings():
    return Settings()


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Build settings, optionally from a YAML configuration file.

    Values from the file (and its .local.yaml override) take precedence over
    environment variables. Without a path the cached defaults are returned.
    """
    if not config_path:
        return get_settings()

    raw_config = ConfigManager().load_config(config_path)
    logger.debug("Loaded configuration keys from %s: %s", config_path, sorted(raw_config))
    return Settings(**_settings_from_config(raw_config))


def _settings_from_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten the YAML layout into Settings keyword arguments.

    Expected layout (every key optional):

        gcd:
          default_algorithm: all
          max_sieve_bound: 10000000
        logging:
          level: INFO
          format: "%(levelname)s %(message)s"
    """
    values: Dict[str, Any] = {}

    gcd_section = _config_section(raw, 'gcd')
    if 'default_algorithm' in gcd_section:
        values['default_algorithm'] = gcd_section['default_algorithm']
    if 'max_sieve_bound' in gcd_section:
        values['max_sieve_bound'] = gcd_section['max_sieve_bound']

    logging_section = _config_section(raw, 'logging')
    if 'level' in logging_section:
        values['log_level'] = logging_section['level']
    if 'format' in logging_section:
        values['log_format'] = logging_section['format']

    return values


def _config_section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a top-level section, which must be a mapping when present."""
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(
            f"'{name}' section must be a mapping, got {type(section).__name__}: {section!r}"
        )
    return section
