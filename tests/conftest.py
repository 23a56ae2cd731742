from __future__ import annotations

import pytest

from db import init_engine
from schema import migrate_latest
from seeder import run_seeds


@pytest.fixture()
def engine(tmp_path):
    eng = init_engine(f"sqlite:///{tmp_path / 'ccp-test.db'}")
    yield eng
    eng.dispose()


@pytest.fixture()
def migrated(engine):
    migrate_latest(engine)
    return engine


@pytest.fixture()
def seeded(migrated):
    run_seeds(migrated)
    return migrated


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'ccp-app.db'}")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    from app import create_app

    flask_app = create_app()
    flask_app.config["TESTING"] = True
    yield flask_app

    from db import engine

    if engine is not None:
        engine.dispose()


@pytest.fixture()
def cli_runner(app):
    return app.test_cli_runner()
