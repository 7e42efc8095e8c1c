"""
Enregistrements Media Time de test et jeu de donnees SQLite.
"""

import json
from typing import Optional

from sqlmodel import Session

from repository_mediatime.core.entities.media import MediaContent, MediaRecord
from repository_mediatime.infrastructure.persistence.database import get_engine
from repository_mediatime.infrastructure.persistence.models import (
    MediaTimeRecordModel,
    RepositoryInstanceConfigModel,
    RepositoryInstanceModel,
    UserModel,
)

WWWROOT = "https://lms.example.com"


def make_record(
    record_id: int,
    title: str = "Intro",
    source: str = "file",
    videourl: Optional[str] = "https://cdn.example.com/videos/intro.mp4",
    posterimage: Optional[str] = "https://cdn.example.com/posters/intro.png",
    timecreated: int = 1_700_000_000,
    usermodified: int = 2,
) -> MediaRecord:
    """Construit un MediaRecord de test."""
    return MediaRecord(
        id=record_id,
        source=source,
        content=MediaContent(title=title, videourl=videourl, posterimage=posterimage),
        timecreated=timecreated,
        timemodified=timecreated + 60,
        usermodified=usermodified,
    )


VIDEO_URL = "https://cdn.example.com/videos/intro.mp4"


def seed_database(database_url: str) -> None:
    """Cree deux utilisateurs, une instance (liens externes) et trois ressources."""
    with Session(get_engine(database_url)) as session:
        session.add(UserModel(id=2, username="admin", firstname="Admin", lastname="User", siteadmin=True))
        session.add(UserModel(id=3, username="student", firstname="Sam", lastname="Student"))
        session.add(RepositoryInstanceModel(id=1, typename="mediatime", name="Media Time"))
        session.add(RepositoryInstanceConfigModel(instanceid=1, name="externalfile", value="1"))
        session.add(MediaTimeRecordModel(
            id=10, source="file", timecreated=100, usermodified=2,
            content=json.dumps({"title": "Old", "videourl": "https://cdn.example.com/videos/old.webm"}),
        ))
        session.add(MediaTimeRecordModel(
            id=11, source="streaming", timecreated=200, usermodified=3,
            content=json.dumps({"title": "Intro", "videourl": VIDEO_URL}),
        ))
        session.add(MediaTimeRecordModel(
            id=12, source="videotime", timecreated=300,
            content=json.dumps({"title": "Disabled", "videourl": VIDEO_URL}),
        ))
        session.commit()
