# tasktracker/core/config.py
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본 앱 설정
    app_env: Literal["dev", "prod", "test"] = Field("dev", alias="ENV")
    app_version: str = Field("0.1.0", alias="APP_VERSION")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # DB
    database_url: str = Field("sqlite:///./tasks.db", alias="DATABASE_URL")
    database_username: Optional[str] = Field(None, alias="DATABASE_USERNAME")
    database_password: Optional[str] = Field(None, alias="DATABASE_PASSWORD")
    schema_mode: Literal["none", "validate", "create"] = Field("create", alias="SCHEMA_MODE")

    # HTTP
    http_host: str = Field("0.0.0.0", alias="HTTP_HOST")
    http_port: int = Field(8080, alias="HTTP_PORT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
