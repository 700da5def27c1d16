from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator
import os


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = Field(
        default="File Server API",
        validation_alias=AliasChoices("APP_NAME", "app_name"),
    )

    # Root that every requested path is resolved against
    base_dir: str = Field(
        default_factory=os.getcwd,
        validation_alias=AliasChoices("FILESERVER_BASE_DIR", "BASE_DIR", "base_dir"),
    )
    chunk_size: int = Field(
        default=64 * 1024,
        validation_alias=AliasChoices("FILESERVER_CHUNK_SIZE", "CHUNK_SIZE", "chunk_size"),
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("FILESERVER_HOST", "HOST", "host"),
    )
    port: int = Field(
        default=8080,
        validation_alias=AliasChoices("FILESERVER_PORT", "PORT", "port"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )
    cors_origins: list[str] = Field(
        default=["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins"),
    )

    @field_validator("chunk_size")
    @classmethod
    def _positive_chunk(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("chunk_size must be positive")
        return v

    @field_validator("base_dir")
    @classmethod
    def _absolute_base(cls, v: str) -> str:
        return os.path.abspath(os.path.expanduser(v))


settings = Settings()
