"""
Docmost MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Literal


class DocmostSettings(BaseSettings):
    """Docmost API configuration."""
    api_url: str = Field(..., alias="DOCMOST_API_URL")
    api_token: str = Field(..., alias="DOCMOST_API_TOKEN")
    timeout_seconds: float = Field(30.0, alias="DOCMOST_TIMEOUT_SECONDS")
    page_size: int = Field(100, alias="DOCMOST_PAGE_SIZE")

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class CacheSettings(BaseSettings):
    """Caching configuration."""
    enabled: bool = Field(True, alias="CACHE_ENABLED")
    ttl_directory: int = Field(300, alias="CACHE_TTL_DIRECTORY_SECONDS")
    ttl_content: int = Field(900, alias="CACHE_TTL_CONTENT_SECONDS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    docmost: DocmostSettings = Field(default_factory=DocmostSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
