from __future__ import annotations

import pytest

from megasena import create_app
from megasena.services.lottery_types import Draw


@pytest.fixture()
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'test.db'}",
            "GEMINI_API_KEY": "",
            "LOG_LEVEL": "WARNING",
        }
    )
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def session(app):
    db = app.extensions["session_factory"]()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def sample_draws() -> list[Draw]:
    """Three contests, most recent first."""

    return [
        Draw(id=3, date="08/01/2025", numbers=(5, 12, 23, 34, 45, 56)),
        Draw(id=2, date="04/01/2025", numbers=(1, 2, 3, 4, 5, 6)),
        Draw(id=1, date="01/01/2025", numbers=(1, 7, 8, 9, 10, 11)),
    ]
