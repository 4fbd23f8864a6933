"""
Shared fixtures.
"""

import pytest

from docmost_mcp.config import CacheSettings, DocmostSettings, Settings


@pytest.fixture
def make_settings():
    def factory(**cache) -> Settings:
        return Settings(
            docmost=DocmostSettings(
                DOCMOST_API_URL="https://docs.example.com/api/",
                DOCMOST_API_TOKEN="secret-token",
            ),
            cache=CacheSettings(**cache),
        )
    return factory


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()
