# namecycle/src/namecycle/core/config.py

import logging

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = Field(default="INFO")

    # Key sequences bound while the mode is enabled
    advance_key: str = Field(default="C-c n")
    retreat_key: str = Field(default="C-c p")

    enabled_by_default: bool = Field(default=True)

    @model_validator(mode="after")
    def check_distinct_keys(self):
        if self.advance_key == self.retreat_key:
            raise ValueError(
                f"advance_key and retreat_key are both '{self.advance_key}'"
            )
        return self

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NAMECYCLE_",
        "extra": "ignore"
    }

    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


# Instantiate settings
settings = Settings()

LOG_LEVEL = settings.log_level
ADVANCE_KEY = settings.advance_key
RETREAT_KEY = settings.retreat_key
