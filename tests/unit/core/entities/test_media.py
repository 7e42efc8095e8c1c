"""Tests pour le decodage du contenu Media Time."""

import json

from repository_mediatime.core.entities.media import MediaContent


class TestMediaContent:
    """Tests de MediaContent.from_json."""

    def test_decodes_known_keys(self):
        raw = json.dumps({
            "title": "Intro",
            "description": "Premier cours",
            "videourl": "https://cdn.example.com/intro.mp4",
            "posterimage": "/pix/intro.png",
            "duration": 42,
        })

        content = MediaContent.from_json(raw)

        assert content.title == "Intro"
        assert content.description == "Premier cours"
        assert content.videourl == "https://cdn.example.com/intro.mp4"
        assert content.posterimage == "/pix/intro.png"
        assert content.extra == {"duration": 42}

    def test_invalid_json_gives_empty_content(self):
        assert MediaContent.from_json("{not json") == MediaContent()

    def test_empty_or_non_object_gives_empty_content(self):
        assert MediaContent.from_json(None) == MediaContent()
        assert MediaContent.from_json("") == MediaContent()
        assert MediaContent.from_json("[1, 2]") == MediaContent()

    def test_missing_title_is_empty_string(self):
        assert MediaContent.from_json('{"videourl": "a.mp4"}').title == ""
