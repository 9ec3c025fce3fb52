"""
Shared pytest fixtures for the catalog tests.

Every test gets a fresh in-memory SQLite database. The FastAPI app is
pointed at it by overriding the get_db dependency, so HTTP tests and
direct CRUD calls see the same data.
"""
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog import crud
from catalog.database import Base, get_db, register_engine_events
from catalog.main import app
from catalog.models import CastMember, CastMemberType, Category, Genre, Video

API = "/api/v1"


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_engine_events(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_category(db: Session) -> Callable[..., Category]:
    def factory(**overrides) -> Category:
        data = {"name": "Movies", "description": "Feature-length films"}
        data.update(overrides)
        return crud.category.create(db, obj_in=data)
    return factory


@pytest.fixture
def make_genre(db: Session) -> Callable[..., Genre]:
    def factory(**overrides) -> Genre:
        data = {"name": "Drama"}
        data.update(overrides)
        return crud.genre.create(db, obj_in=data)
    return factory


@pytest.fixture
def make_cast_member(db: Session) -> Callable[..., CastMember]:
    def factory(**overrides) -> CastMember:
        data = {"name": "Jane Doe", "type": CastMemberType.ACTOR}
        data.update(overrides)
        return crud.cast_member.create(db, obj_in=data)
    return factory


@pytest.fixture
def make_video(db: Session) -> Callable[..., Video]:
    """Insert a video directly, bypassing the transactional write path"""
    def factory(categories=(), genres=(), **overrides) -> Video:
        data = {
            "title": "The First Frame",
            "description": "A short film about the first frame ever shot.",
            "year_launched": 2020,
            "opened": False,
            "rating": "L",
            "duration": 90,
        }
        data.update(overrides)
        video = Video(**data)
        video.categories = list(categories)
        video.genres = list(genres)
        db.add(video)
        db.commit()
        db.refresh(video)
        return video
    return factory
