import os
import random

import pytest

# main.app is built at import; keep it off the working directory's database
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_math_quest.db")

from fastapi.testclient import TestClient  # noqa: E402

from engine import GameEngine  # noqa: E402
from localization import Localizer  # noqa: E402
from main import create_app  # noqa: E402
from storage import Storage  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(rng):
    g = GameEngine(Localizer("en"), rng=rng)
    g.set_player("Alva", 3)
    return g


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'quest.db'}"


@pytest.fixture
def storage(db_url):
    return Storage(db_url)


@pytest.fixture
def app(storage, rng):
    return create_app(storage=storage, rng=rng)


@pytest.fixture
def client(app):
    return TestClient(app)
