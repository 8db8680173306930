# tests/test_settings.py

from deepwiki_dl.config.settings import Settings, get_settings


def test_settings_defaults():
    settings = Settings()

    assert settings.MCP_SERVER_URL == "https://mcp.deepwiki.com/mcp"
    assert settings.OUTPUT_DIR_SUFFIX == "deepwiki"
    assert settings.STRUCTURE_FILENAME == "_wiki_structure.md"
    # The structure dump must never collide with a numbered page file.
    assert not settings.STRUCTURE_FILENAME[0].isdigit()


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("DEEPWIKI_DL_MCP_SERVER_URL", "http://localhost:9000/mcp")
    monkeypatch.setenv("DEEPWIKI_DL_SSE_READ_TIMEOUT", "12.5")

    settings = Settings()

    assert settings.MCP_SERVER_URL == "http://localhost:9000/mcp"
    assert settings.SSE_READ_TIMEOUT == 12.5


def test_get_settings_is_a_singleton():
    assert get_settings() is get_settings()
