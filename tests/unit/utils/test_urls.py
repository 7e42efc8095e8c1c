"""Tests pour les helpers d'URL."""

import pytest

from repository_mediatime.utils.urls import get_extension, last_path_segment


class TestGetExtension:

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://cdn.example.com/v/intro.mp4", "mp4"),
            ("https://cdn.example.com/v/Intro.MP4?token=abc", "mp4"),
            ("https://cdn.example.com/v/intro.webm#t=10", "webm"),
            ("https://cdn.example.com/stream/42", ""),
            ("https://cdn.example.com/v/intro.mp4/", ""),
            ("https://cdn.example.com", "com"),
            ("https://cdn.example.com/watch?v=intro.mp4", ""),
            ("/pluginfile.php/12/intro.MOV#t=1", "mov"),
            ("", ""),
        ],
    )
    def test_extension(self, url, expected):
        assert get_extension(url) == expected


class TestLastPathSegment:

    def test_filename(self):
        assert last_path_segment("https://cdn.example.com/v/intro.mp4?sig=1") == "intro.mp4"

    def test_trailing_slash(self):
        assert last_path_segment("https://cdn.example.com/v/intro/") == "intro"

    def test_no_path(self):
        assert last_path_segment("https://cdn.example.com") == ""
