from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FallbackPayer(str, Enum):
    FIRST_IN_ROSTER = "first"
    LAST_IN_ROSTER = "last"


class EmptyItemPolicy(str, Enum):
    DELETE = "delete"
    REJECT = "reject"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    currency: str = Field("Rs.", alias="SPLITSHARE_CURRENCY")
    fallback_payer: FallbackPayer = Field(FallbackPayer.FIRST_IN_ROSTER, alias="SPLITSHARE_FALLBACK_PAYER")
    empty_item_policy: EmptyItemPolicy = Field(EmptyItemPolicy.DELETE, alias="SPLITSHARE_EMPTY_ITEM_POLICY")
    log_level: str = Field("INFO", alias="SPLITSHARE_LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
