"""Tests for config module."""
from bookmark_search.config import Config, SearchConfig


class TestConfig:
    def test_default_values(self, monkeypatch):
        for name in ("BOOKMARKS_FUZZY_THRESHOLD", "BOOKMARKS_STRONG_MATCH_THRESHOLD", "BOOKMARKS_RESULT_LIMIT"):
            monkeypatch.delenv(name, raising=False)
        config = Config()
        assert config.search.threshold == 0.45
        assert config.search.strong_match_threshold == 0.8
        assert config.search.result_limit == 10
        assert config.bookmarks_path is None
        assert config.chrome_profile == "Default"

    def test_search_from_env(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_FUZZY_THRESHOLD", "0.6")
        monkeypatch.setenv("BOOKMARKS_STRONG_MATCH_THRESHOLD", "0.9")
        monkeypatch.setenv("BOOKMARKS_RESULT_LIMIT", "25")

        config = SearchConfig.from_env()
        assert config.threshold == 0.6
        assert config.strong_match_threshold == 0.9
        assert config.result_limit == 25

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_FILE", "/tmp/Bookmarks")
        monkeypatch.setenv("BOOKMARKS_FUZZY_THRESHOLD", "0.5")

        config = Config.from_env()
        assert str(config.bookmarks_path) == "/tmp/Bookmarks"
        assert config.search.threshold == 0.5

    def test_chrome_profile_from_env(self, monkeypatch):
        monkeypatch.setenv("BOOKMARKS_CHROME_PROFILE", "Profile 1")
        config = Config.from_env()
        assert config.chrome_profile == "Profile 1"

    def test_chrome_profile_default(self, monkeypatch):
        monkeypatch.delenv("BOOKMARKS_CHROME_PROFILE", raising=False)
        config = Config.from_env()
        assert config.chrome_profile == "Default"
