import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db.session import get_db, init_db
from db.models.api_keys import ApiKey
from db.models.categories import Category
from db.models.tags import Tag
from db.models.tutorials import Tutorial
from main import app

API_KEY = "lk_test_1700000000"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def api_key(db):
    key = ApiKey(name="tests", key=API_KEY, is_active=True)
    db.add(key)
    db.commit()
    return key


@pytest.fixture
def headers(api_key):
    return {"x-api-key": API_KEY}


@pytest.fixture
def make_category(db):
    def _make(name, slug, display_order=0):
        category = Category(name=name, slug=slug, display_order=display_order, tutorial_count=0)
        db.add(category)
        db.commit()
        return category
    return _make


@pytest.fixture
def make_tag(db):
    def _make(name, slug, tutorial_count=0):
        tag = Tag(name=name, slug=slug, tutorial_count=tutorial_count)
        db.add(tag)
        db.commit()
        return tag
    return _make


@pytest.fixture
def make_tutorial(db):
    base = datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc)

    def _make(slug, day=0, status="published", difficulty="easy", category=None, tags=(), **fields):
        tutorial = Tutorial(
            title=fields.pop("title", slug.replace("-", " ").title()),
            slug=slug,
            difficulty=difficulty,
            status=status,
            category_id=category.id if category else None,
            published_at=base + datetime.timedelta(days=day) if status == "published" else None,
            views=fields.pop("views", 0),
            examples=fields.pop("examples", []),
            solutions=fields.pop("solutions", {}),
            **fields,
        )
        tutorial.tags = list(tags)
        db.add(tutorial)
        db.commit()
        return tutorial
    return _make


@pytest.fixture
def catalog(make_category, make_tag, make_tutorial):
    """
    Small published/draft mix used by the listing tests.
    """
    arrays = make_category("Arrays & Strings", "arrays", display_order=1)
    graphs = make_category("Graphs", "graphs", display_order=2)
    two_pointers = make_tag("Two Pointers", "two-pointers")
    hashing = make_tag("Hashing", "hashing")
    bfs = make_tag("BFS", "bfs")

    make_tutorial("two-sum", day=1, category=arrays, tags=[hashing],
                  description="Find two numbers adding up to a target", views=50)
    make_tutorial("three-sum", day=2, difficulty="medium", category=arrays, tags=[two_pointers, hashing], views=30)
    make_tutorial("container-with-most-water", day=3, difficulty="medium", category=arrays, tags=[two_pointers])
    make_tutorial("word-ladder", day=4, difficulty="hard", category=graphs, tags=[bfs], views=10,
                  problem_statement="Transform beginWord into endWord")
    make_tutorial("number-of-islands", day=5, difficulty="medium", category=graphs, tags=[bfs])
    make_tutorial("draft-problem", status="draft", category=arrays, tags=[hashing], difficulty="easy")

    return {
        "arrays": arrays,
        "graphs": graphs,
        "two-pointers": two_pointers,
        "hashing": hashing,
        "bfs": bfs,
    }
