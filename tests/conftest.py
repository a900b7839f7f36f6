import os

import pytest

from submitlog import create_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("SUBMITLOG_") or name == "LOGGER_URL":
            monkeypatch.delenv(name)


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.txt"


@pytest.fixture
def make_app(data_file):
    def factory(**overrides):
        overrides.setdefault("DATA_FILE", str(data_file))
        app = create_app(**overrides)
        app.config["TESTING"] = True
        return app

    return factory


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
