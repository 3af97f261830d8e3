"""Application configuration — merges .env, env vars, and CLI args."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from html2markdown.models import Options


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HTML2MD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parsing
    parser: Literal["lxml", "html.parser"] = "lxml"

    # Render options
    unordered_list_bullets: bool = False
    escape_markdown: bool = False
    mastodon: bool = False
    swiftui: bool = False
    bold_tag: bool = False
    bold_mention: bool = False

    def to_options(self) -> Options:
        return Options(
            unordered_list_bullets=self.unordered_list_bullets,
            escape_markdown=self.escape_markdown,
            mastodon=self.mastodon,
            swiftui=self.swiftui,
            bold_tag=self.bold_tag,
            bold_mention=self.bold_mention,
        )


def get_settings(**overrides: object) -> Settings:
    """Create settings with optional CLI overrides."""
    return Settings(**overrides)  # type: ignore[arg-type]
