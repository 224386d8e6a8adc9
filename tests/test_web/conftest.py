from __future__ import annotations

import pytest

from cssedit.config import EditorConfig
from cssedit.persistence import AutoSave, MemoryStore
from cssedit.session import EditorSession
from cssedit.web.app import create_app


@pytest.fixture
def autosave():
    saver = AutoSave(MemoryStore(), key="cssRules", debounce_ms=60_000, saved_reset_ms=60_000)
    yield saver
    saver.close()


@pytest.fixture
def session(autosave):
    return EditorSession(autosave=autosave)


@pytest.fixture
def app(session):
    """Create a Flask app for testing."""
    application = create_app(config=EditorConfig(), session=session)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
