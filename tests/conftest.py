import pytest
from fastapi.testclient import TestClient

from blogapi.core.config import Settings
from blogapi.main import create_app
from blogapi.storage.database import Database
from tests.factories import make_user, make_category, make_post


@pytest.fixture
def settings():
    """每个测试一份独立的内存 SQLite"""
    return Settings(database_url="sqlite:///:memory:", log_level="WARNING", create_tables=True)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(settings):
    """不经过 HTTP，直接给仓库用的会话"""
    database = Database(settings.database_url)
    database.connect()
    database.create_all()
    session = database.session()
    yield session
    session.close()
    database.close()


@pytest.fixture
def user(client):
    return make_user(client, "alice", "alice@example.com")


@pytest.fixture
def other_user(client):
    return make_user(client, "bob", "bob@example.com")


@pytest.fixture
def category(client):
    return make_category(client, "python")


@pytest.fixture
def post(client, user, category):
    return make_post(client, user["id"], "Hello World", postsCategoryId=category["id"], readTime=3)
