from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    llm_provider: str = Field(default="openai", validation_alias="LLM_PROVIDER")
    llm_model: Optional[str] = Field(default=None, validation_alias="LLM_MODEL")
    llm_temperature: float = Field(default=0.7, validation_alias="LLM_TEMPERATURE")
    openai_api_key: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
    openai_api_base: Optional[str] = Field(
        default=None, validation_alias="OPENAI_API_BASE"
    )
    google_api_key: Optional[str] = Field(default=None, validation_alias="GOOGLE_API_KEY")
    fastapi_port: int = Field(default=8000, validation_alias="FASTAPI_PORT")
    log_path: Optional[str] = Field(default=None, validation_alias="LOG_PATH")
    session_ttl_seconds: int = Field(
        default=3600, validation_alias="SESSION_TTL_SECONDS"
    )
    session_max_items: int = Field(default=512, validation_alias="SESSION_MAX_ITEMS")

    @field_validator("llm_provider", mode="after")
    @classmethod
    def normalize_llm_provider(cls, value: str) -> str:
        return value.lower() if value else value

    @property
    def api_key(self) -> Optional[str]:
        if self.llm_provider == "google":
            return self.google_api_key
        return self.openai_api_key


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig()
