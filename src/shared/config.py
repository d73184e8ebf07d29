"""Environment-driven settings.

Values are read from environment variables at call time so tests can
override them with ``monkeypatch.setenv``:

    ENVIRONMENT           development | test | staging | production
    LOG_LEVEL             overrides the level derived from ENVIRONMENT
    SHIPPING_RATE_PER_KG  flat shipping rate per kilogram (default 30)
    OUTPUT_CHANNEL        stdout | fake
"""

import logging
import os
from decimal import Decimal

from protean.fields.resolved import convert_pydantic_errors
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shared.errors import InvalidInputError

DEFAULT_RATE_PER_KG = Decimal("30")

_LEVEL_MAP = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment: str = "development"
    log_level: str = "DEBUG"
    shipping_rate_per_kg: Decimal = Field(default=DEFAULT_RATE_PER_KG, ge=0, allow_inf_nan=False)
    output_channel: str = Field(default="stdout", pattern=r"^(stdout|fake)$")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        env = (os.getenv("ENVIRONMENT") or "development").lower()
        try:
            return cls(
                environment=env,
                log_level=os.getenv("LOG_LEVEL", _LEVEL_MAP.get(env, "INFO")).upper(),
                shipping_rate_per_kg=os.getenv("SHIPPING_RATE_PER_KG", str(DEFAULT_RATE_PER_KG)),
                output_channel=os.getenv("OUTPUT_CHANNEL", "stdout").lower(),
            )
        except ValidationError as exc:
            raise InvalidInputError(convert_pydantic_errors(exc)) from None


def get_settings() -> Settings:
    return Settings.from_env()
