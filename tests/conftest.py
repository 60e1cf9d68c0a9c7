import os

# Must be set before database.py is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("LOG_DIR", None)

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from config import Settings, get_settings
import main


class ZeroSwapRandom:
    """randint always picks the upper bound, so Fisher-Yates swaps nothing."""

    def randint(self, a, b):
        return b


class FirstSwapRandom:
    """randint always picks 0: every step swaps position i with position 0."""

    def randint(self, a, b):
        return a


REPLY = (
    "Sure! Here is your quiz:\n"
    "\n"
    "$1. Capital of France?|Paris#|London|Berlin|Madrid\n"
    "$2. Pick two|A#|B|C#|D\n"
    "Good luck!"
)


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def zero_swap():
    return ZeroSwapRandom()


@pytest.fixture
def first_swap():
    return FirstSwapRandom()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def settings(tmp_path):
    return Settings(openai_api_key="test-key", output_dir=str(tmp_path))


@pytest.fixture
def llm_client():
    client = MagicMock()
    client.chat.completions.create.return_value = completion(REPLY)
    return client


@pytest.fixture
def archiver():
    return MagicMock()


@pytest.fixture
def client(session_factory, settings, llm_client, archiver):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    main.app.dependency_overrides[get_db] = override_get_db
    main.app.dependency_overrides[get_settings] = lambda: settings
    main.app.dependency_overrides[main.get_llm_client] = lambda: llm_client
    main.app.dependency_overrides[main.get_archive_client] = lambda: archiver
    main.app.dependency_overrides[main.get_rng] = ZeroSwapRandom
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()
