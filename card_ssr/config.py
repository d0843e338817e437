from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from card_ssr.exceptions import StartupConfigError


class Settings(BaseSettings):
    """Service settings loaded from environment variables or .env file."""

    listen_host: str = Field(
        ...,
        description="Bind address in host:port form",
    )
    public_url: str = Field(
        ...,
        description="Public base URL of the site, used for og:url",
    )
    image_url: str = Field(
        ...,
        description="Base URL that card preview images are served from",
    )
    backend_url: str = Field(
        ...,
        description="Base URL of the cards backend API",
    )
    sitename: str = Field(
        ...,
        description="Site display name, used for og:site_name",
    )
    index_html_path: str = Field(
        ...,
        description="Path to the prebuilt SPA index.html",
    )
    backend_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for a backend metadata request",
    )
    twitter_site: str = Field(
        default="@howtocards_io",
        description="Handle emitted as twitter:site",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Log level for the service loggers",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow both PUBLIC_URL and public_url
        extra="ignore",  # Ignore extra environment variables
        frozen=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("public_url", "image_url", "backend_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def backend_card_url(self, card_id: int) -> str:
        return f"{self.backend_url}/api/cards/{card_id}/meta/"

    def card_page_url(self, card_id: int) -> str:
        return f"{self.public_url}/open/{card_id}"

    def image_src(self, preview_url: str) -> str:
        return f"{self.image_url}/{preview_url}"

    def bind_address(self) -> tuple[str, int]:
        """Split ``listen_host`` into a host and a port."""
        host, sep, port = self.listen_host.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise StartupConfigError(
                f"LISTEN_HOST must look like host:port, got {self.listen_host!r}"
            )
        return host, int(port)


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]).upper()
            for error in exc.errors()
        )
        raise StartupConfigError(f"Invalid or missing configuration: {fields}") from exc


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
