import pytest

from app import app as flask_app


DB_ENV = {
    "DB_HOST": "db",
    "DB_NAME": "labdb",
    "DB_USER": "labuser",
    "DB_PASS": "labpass",
}


@pytest.fixture
def db_env(monkeypatch):
    for name, value in DB_ENV.items():
        monkeypatch.setenv(name, value)
    return DB_ENV


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client
