from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="DEEPWIKI_DL_"
    )

    # ------------------------------------------------------------------
    # DeepWiki MCP server
    # ------------------------------------------------------------------
    MCP_SERVER_URL: str = Field(
        default="https://mcp.deepwiki.com/mcp",
        description="Streamable HTTP endpoint of the DeepWiki MCP server.",
    )

    REQUEST_TIMEOUT: float = Field(
        default=30.0,
        description="Seconds to wait for HTTP operations against the MCP server.",
    )

    SSE_READ_TIMEOUT: float = Field(
        default=300.0,
        description=(
            "Seconds to wait for a streamed tool response. Large wikis can take "
            "a while to be returned by read_wiki_contents."
        ),
    )

    CLIENT_NAME: str = Field(
        default="deepwiki-dl",
        description="Client name reported during the MCP handshake.",
    )

    CLIENT_VERSION: str = Field(
        default="1.0.0",
        description="Client version reported during the MCP handshake.",
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    OUTPUT_DIR_SUFFIX: str = Field(
        default="deepwiki",
        description="Suffix for the default output directory: {repo}-{suffix}.",
    )

    STRUCTURE_FILENAME: str = Field(
        default="_wiki_structure.md",
        description=(
            "Name of the raw structure dump written next to the pages. "
            "Must not start with a digit so it never clashes with a page file."
        ),
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level used by the CLI.",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so we only construct Settings once.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
