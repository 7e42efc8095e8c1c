"""Tests pour SQLModelMediaRecordRepository."""

import json

from repository_mediatime.infrastructure.persistence.models import MediaTimeRecordModel
from repository_mediatime.infrastructure.persistence.repositories import (
    SQLModelMediaRecordRepository,
)


def _add(session, source: str, title: str, timecreated: int, record_id: int | None = None):
    model = MediaTimeRecordModel(
        id=record_id,
        source=source,
        content=json.dumps({"title": title, "videourl": f"https://cdn.example.com/{title}.mp4"}),
        timecreated=timecreated,
        timemodified=timecreated,
        usermodified=2,
    )
    session.add(model)
    session.commit()
    return model


class TestIterBySources:
    """Tests du parcours filtre et trie."""

    def test_filters_by_enabled_sources(self, session):
        _add(session, "file", "a", 100)
        _add(session, "streaming", "b", 200)
        _add(session, "disabled", "c", 300)

        repo = SQLModelMediaRecordRepository(session)
        records = list(repo.iter_by_sources(frozenset({"file", "streaming"})))

        assert {r.source for r in records} == {"file", "streaming"}
        assert len(records) == 2

    def test_ordered_by_timecreated_desc(self, session):
        _add(session, "file", "old", 100)
        _add(session, "file", "new", 300)
        _add(session, "file", "middle", 200)

        repo = SQLModelMediaRecordRepository(session)
        titles = [r.content.title for r in repo.iter_by_sources(frozenset({"file"}))]

        assert titles == ["new", "middle", "old"]

    def test_ties_keep_insertion_order(self, session):
        first = _add(session, "file", "first", 100)
        second = _add(session, "file", "second", 100)

        repo = SQLModelMediaRecordRepository(session)
        ids = [r.id for r in repo.iter_by_sources(frozenset({"file"}))]

        assert ids == [first.id, second.id]

    def test_empty_sources_yield_nothing(self, session):
        _add(session, "file", "a", 100)

        repo = SQLModelMediaRecordRepository(session)

        assert list(repo.iter_by_sources(frozenset())) == []

    def test_content_is_decoded(self, session):
        _add(session, "file", "intro", 100)

        record = next(SQLModelMediaRecordRepository(session).iter_by_sources(frozenset({"file"})))

        assert record.content.title == "intro"
        assert record.content.videourl == "https://cdn.example.com/intro.mp4"

    def test_generator_can_be_closed_early(self, session):
        """Fermer le generateur avant la fin libere le resultat sans erreur."""
        _add(session, "file", "a", 100)
        _add(session, "file", "b", 200)

        repo = SQLModelMediaRecordRepository(session)
        iterator = repo.iter_by_sources(frozenset({"file"}))
        next(iterator)
        iterator.close()

        # La session reste utilisable apres la fermeture
        assert repo.get_by_id(1) is not None


class TestGetById:

    def test_found(self, session):
        model = _add(session, "file", "intro", 100)

        record = SQLModelMediaRecordRepository(session).get_by_id(model.id)

        assert record is not None
        assert record.id == model.id
        assert record.timecreated == 100
        assert record.usermodified == 2

    def test_not_found(self, session):
        assert SQLModelMediaRecordRepository(session).get_by_id(404) is None
