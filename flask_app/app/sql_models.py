# sql_models.py - Database model for the seaport reference table
# Seaports are owned by the hosted backend; this service only reads them.

from flask_app.setup_imports import *
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# ✅ Database connection (engine connects lazily on first query)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///zone_systems.db")


def make_session_factory(database_url: str = DATABASE_URL):
    """
    Build a sessionmaker bound to database_url.
    """
    engine = create_engine(database_url)
    return sessionmaker(autoflush=False, bind=engine)


SessionLocal = make_session_factory()

Base = declarative_base()


class Seaport(Base):
    """
    Database model for registered seaports.
    Coordinates are stored as text by the upstream store and may be blank.
    """
    __tablename__ = "seaports"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=True)
    latitude = Column(String, nullable=True)
    longitude = Column(String, nullable=True)
    classification = Column(Integer, nullable=True)   # port tier, e.g. 1 or 3

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "classification": self.classification,
        }
