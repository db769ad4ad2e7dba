# toolshub/database.py

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app
from sqlalchemy import inspect, text

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("categories", "tools", "comments")
EXTENSION_KEY = "toolshub_db_manager"


class ConnectionState(enum.Enum):
    PENDING = "pending"
    CONNECTED = "connected"
    FAILED = "failed"
    NOT_CONFIGURED = "not_configured"


@dataclass(frozen=True)
class ConnectionResult:
    state: ConnectionState
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is ConnectionState.CONNECTED


class DatabaseManager:
    """Owns the store connection lifecycle for one application.

    Each app gets its own manager in ``create_app``, stored in
    ``app.extensions`` and looked up with ``get_db_manager``. ``connect``
    never raises: it reports the outcome as a ``ConnectionResult`` and
    records it in ``state``.
    """

    def __init__(self, db):
        self.db = db
        self.state = ConnectionState.PENDING
        self.last_error: Optional[str] = None

    def init_app(self, app) -> None:
        app.extensions[EXTENSION_KEY] = self

    @property
    def ready(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    @property
    def configured(self) -> bool:
        return self.state is not ConnectionState.NOT_CONFIGURED

    def mark_not_configured(self, reason: str) -> ConnectionResult:
        self.state = ConnectionState.NOT_CONFIGURED
        self.last_error = reason
        logger.critical(f"Database not configured: {reason}")
        return ConnectionResult(self.state, reason)

    def connect(self) -> ConnectionResult:
        """Check connectivity and make sure the tables exist. Needs an app context."""
        if self.state is ConnectionState.NOT_CONFIGURED:
            return ConnectionResult(self.state, self.last_error)

        # Register every model with the metadata before create_all
        from toolshub import models  # noqa: F401

        try:
            with self.db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            self.state = ConnectionState.FAILED
            self.last_error = str(e)
            logger.error(f"Database connection failed: {e}")
            return ConnectionResult(self.state, self.last_error)

        try:
            self.db.create_all()
            tables = inspect(self.db.engine).get_table_names()
            missing = set(REQUIRED_TABLES) - set(tables)
            if missing:
                raise RuntimeError(f"Required tables missing: {sorted(missing)}")
        except Exception as e:
            self.state = ConnectionState.FAILED
            self.last_error = str(e)
            logger.error(f"Error creating tables: {e}", exc_info=True)
            return ConnectionResult(self.state, self.last_error)

        self.state = ConnectionState.CONNECTED
        self.last_error = None
        logger.info(f"Database connection successful, tables verified: {list(REQUIRED_TABLES)}")
        return ConnectionResult(self.state)

    def ping(self) -> bool:
        try:
            self.db.session.execute(text("SELECT 1"))
            self.db.session.commit()
            return True
        except Exception as e:
            self.db.session.rollback()
            logger.error(f"Database health check failed: {e}")
            return False


def get_db_manager(app=None) -> DatabaseManager:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
