from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional

from fastapi_lang.i18n.catalog import LangCode

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "fastapi-lang"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True
    log_file: Optional[str] = None

    # Language negotiation settings
    # LANGUAGE_WILDCARD=de, LANGUAGE_URL_POSITION=-1, LANGUAGE_WEIGHTS='{"en": 1.0, "es": 0.5}'
    language_wildcard: Optional[str] = None
    language_url_position: Optional[int] = None
    language_weights: dict[str, float] = {}
    set_content_language: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("language_wildcard")
    @classmethod
    def validate_wildcard(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and LangCode.get(value) is None:
            raise ValueError(f"unknown language code '{value}'")
        return value

    @field_validator("language_weights")
    @classmethod
    def validate_weights(cls, value: dict[str, float]) -> dict[str, float]:
        unknown = sorted(code for code in value if LangCode.get(code) is None)
        if unknown:
            raise ValueError(f"unknown language codes: {', '.join(unknown)}")
        return value


settings = Settings()
