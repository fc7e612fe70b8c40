#database.py

from flask_app.setup_imports import *
from sqlalchemy.exc import SQLAlchemyError
from flask_app.app.sql_models import Seaport, SessionLocal
from zone_engine.types import SeaportSourceError


def fetch_seaports(session_factory=SessionLocal):
    """
    Reads the full seaport list (single query, no pagination).
    Returns a list of plain dicts; raises SeaportSourceError if the store fails.
    """
    session = session_factory()
    try:
        rows = session.query(Seaport).order_by(Seaport.id).all()
        records = [row.to_record() for row in rows]
        logging.debug(f"✅ Loaded {len(records)} seaports from database")
        return records
    except SQLAlchemyError as e:
        logging.error(f"❌ Failed to fetch seaports from DB: {e}")
        raise SeaportSourceError(f"seaport query failed: {e}") from e
    finally:
        session.close()

