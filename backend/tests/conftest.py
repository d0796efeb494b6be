"""
Shared fixtures: settings built in code (no .env), the fixture repository for
handler tests, an in-memory SQLite repository for store tests and a repository
that always fails for the 500 paths.
"""
import pytest
from fastapi.testclient import TestClient

from faqaas.config import Settings
from faqaas.database.connection import build_engine, build_session_factory, init_db
from faqaas.errors import StorageError
from faqaas.main import create_app
from faqaas.repository import FAQRepository, InMemoryFAQRepository, SQLFAQRepository
from faqaas.utils.security import get_password_hash, new_admin_session

API_KEY = "test-api-key"
JWT_KEY = "test-jwt-key"
ADMIN_PASSWORD = "secret"
# Low cost factor keeps the suite fast, bcrypt checks any cost
ADMIN_PASSWORD_HASH = get_password_hash(ADMIN_PASSWORD, rounds=4)
SOME_DB_ERROR = "some DB error"


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "JWT_KEY": JWT_KEY,
        "ADMIN_PASSWORD": ADMIN_PASSWORD_HASH,
        "API_KEY": API_KEY,
        "SUPPORTED_LOCALES": "en,de,fr,es",
        "HTTP_ALLOWED": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class BrokenFAQRepository(FAQRepository):
    def all_faqs(self):
        raise StorageError(SOME_DB_ERROR)

    def faq_by_id(self, faq_id):
        raise StorageError(SOME_DB_ERROR)

    def search_faqs(self, locale_code, query):
        raise StorageError(SOME_DB_ERROR)

    def update_search_index(self):
        raise StorageError(SOME_DB_ERROR)

    def create_faq(self):
        raise StorageError(SOME_DB_ERROR)

    def save_faq_text(self, faq_id, text):
        raise StorageError(SOME_DB_ERROR)

    def delete_faq(self, faq_id):
        raise StorageError(SOME_DB_ERROR)

    def clear_db(self):
        raise StorageError(SOME_DB_ERROR)


def make_client(settings=None, repository=None) -> TestClient:
    app = create_app(settings or make_settings(), repository=repository)
    return TestClient(app, follow_redirects=False)


def login_as_admin(client: TestClient) -> None:
    token, _ = new_admin_session(JWT_KEY)
    client.cookies.set("Authorization", token)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings):
    """Anonymous client on top of the fixture repository."""
    return make_client(settings, InMemoryFAQRepository())


@pytest.fixture
def admin_client(settings):
    c = make_client(settings, InMemoryFAQRepository())
    login_as_admin(c)
    return c


@pytest.fixture
def broken_client(settings):
    c = make_client(settings, BrokenFAQRepository())
    login_as_admin(c)
    return c


@pytest.fixture
def api_headers():
    return {"Authorization": API_KEY}


@pytest.fixture
def sql_engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_repository(sql_engine):
    repo = SQLFAQRepository(build_session_factory(sql_engine))
    repo.clear_db()
    repo.update_search_index()
    return repo
