from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from fastapi import Request
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Engine + session factory, opened at startup and disposed at shutdown."""

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, echo=False, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        # Import des modèles pour qu'ils soient enregistrés sur Base
        import app.models.task  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database connected: %s", self.engine.url.render_as_string(hide_password=True))

    def drop_all(self):
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connection closed")


def get_db(request: Request):
    """Dépendance sessionDB"""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
