import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# DB SQLite pour les tests AVANT d'importer app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest

from app.core.database import Base, SessionLocal, engine, get_db
from app.main import app
from app.models.block import Block
from app.models.page import Page

def override_get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

# Override la dépendance
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def page(db):
    """Page vide"""
    page = Page(slug="test-page", title="Test Page")
    db.add(page)
    db.commit()
    db.refresh(page)
    return page


@pytest.fixture
def make_block(db):
    """Crée un block texte directement à une position donnée"""
    def _make(page_id: int, position: int, text: str = "") -> Block:
        block = Block(page_id=page_id, type="text", position=position, text=text, text_style="p")
        db.add(block)
        db.commit()
        db.refresh(block)
        return block
    return _make
