import logging

from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from server.eazepark.geocoding import ReverseGeocoder

logger = logging.getLogger(__name__)

db = SQLAlchemy()
bcrypt = Bcrypt()
cors = CORS()


def engine_options(config):
    """Pool settings for the shared engine.

    SQLite picks its own pool class, so the bounded queue only applies to
    server databases: fixed capacity, no overflow, callers wait for a free
    connection instead of failing.
    """
    if config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        return {}
    return {
        "pool_size": config["DB_POOL_SIZE"],
        "max_overflow": 0,
        "pool_timeout": None,
        "pool_pre_ping": True,
    }


def init_database(app):
    app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", engine_options(app.config))
    db.init_app(app)


def init_geocoder(app):
    app.extensions["geocoder"] = ReverseGeocoder(
        base_url=app.config["GEOCODER_URL"],
        user_agent=app.config["GEOCODER_USER_AGENT"],
        timeout=app.config["GEOCODER_TIMEOUT"],
    )


def check_database(app):
    """Run one round trip against the store and log the outcome."""
    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database connection error: %s", e)
            return False
    logger.info("Database connected")
    return True


def close_database(app):
    with app.app_context():
        db.engine.dispose()
    logger.info("Database pool closed")
