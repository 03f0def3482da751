from contextlib import contextmanager
import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.orm.exc import StaleDataError

from app.core.config import settings
from app.core.errors import ConflictError

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def atomic(db: Session):
    """Exécute un bloc dans une transaction: commit à la fin, rollback sur toute erreur.

    Une violation d'unicité (page_id, position), ou une ligne supprimée entre
    sa lecture et son écriture, devient une ConflictError que l'appelant
    peut rejouer.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error, transaction rolled back: {e.orig}")
        raise ConflictError("Concurrent modification, retry the operation.") from e
    except StaleDataError as e:
        db.rollback()
        logger.warning(f"Row changed concurrently, transaction rolled back: {e}")
        raise ConflictError("Concurrent modification, retry the operation.") from e
    except Exception:
        db.rollback()
        raise
