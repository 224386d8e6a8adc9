from __future__ import annotations

from flask import Flask

from cssedit.config import EditorConfig
from cssedit.events.bus import EventBus
from cssedit.history.manager import HistoryManager
from cssedit.persistence.autosave import AutoSave
from cssedit.persistence.store import SqliteStore
from cssedit.session import EditorSession


def build_session(config: EditorConfig) -> EditorSession:
    """Create an editor session with SQLite-backed autosave, restoring saved rules."""
    bus = EventBus()
    store = SqliteStore(config.db_path)
    autosave = AutoSave(
        store,
        key=config.storage_key,
        debounce_ms=config.debounce_ms,
        saved_reset_ms=config.saved_reset_ms,
        bus=bus,
    )
    history = HistoryManager(config.max_history_size, bus=bus)
    session = EditorSession(history=history, autosave=autosave, bus=bus)
    session.restore()
    return session


def create_app(
    config: EditorConfig | None = None,
    session: EditorSession | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or EditorConfig()
    app = Flask(__name__)
    app.config["EDITOR"] = config

    if session is None:
        session = build_session(config)
    app.extensions["session"] = session

    from cssedit.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
