"""Tests for bookmarks_reader module."""
import json
import pytest

from bookmark_search.bookmarks_reader import read_chrome_bookmarks, get_chrome_bookmarks_path


class TestReadBookmarks:
    def test_reads_all_bookmarks(self, sample_bookmarks_path):
        bookmarks = read_chrome_bookmarks(sample_bookmarks_path)
        assert len(bookmarks) == 5

    def test_matches_fixture_records(self, sample_bookmarks_path, sample_bookmarks):
        assert read_chrome_bookmarks(sample_bookmarks_path) == sample_bookmarks

    def test_bookmark_fields(self, sample_bookmarks_path):
        b = read_chrome_bookmarks(sample_bookmarks_path)[0]
        assert set(b) == {"id", "title", "url", "domain", "description", "folder"}

    def test_domain_strips_www(self, sample_bookmarks_path):
        bookmarks = read_chrome_bookmarks(sample_bookmarks_path)
        stack = next(b for b in bookmarks if b["id"] == "7")
        assert stack["domain"] == "stackoverflow.com"

    def test_folder_paths_use_root_key(self, sample_bookmarks_path):
        folders = [b["folder"] for b in read_chrome_bookmarks(sample_bookmarks_path)]
        assert "bookmark_bar" in folders
        assert "bookmark_bar/Work" in folders
        assert "other" in folders
        assert "Bookmarks Bar" not in folders

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_chrome_bookmarks(tmp_path / "nonexistent")

    def test_malformed_file_raises(self, tmp_path):
        path = tmp_path / "Bookmarks"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            read_chrome_bookmarks(path)

    def test_missing_roots(self, tmp_path):
        path = tmp_path / "Bookmarks"
        path.write_text(json.dumps({"version": 1}))
        assert read_chrome_bookmarks(path) == []


class TestChromePath:
    def test_profile_in_path(self):
        path = get_chrome_bookmarks_path("Profile 2")
        assert path.name == "Bookmarks"
        assert path.parent.name == "Profile 2"
