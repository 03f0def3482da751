# IMPORTS
import logging
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import atomic
from app.core.errors import ConflictError, InternalError, InvalidArgumentError, NotFoundError
from app.models.page import Page
from app.models.block import Block
from app.services.block_service import list_blocks
from typing import List, Tuple

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 256

# func 1: get_home_page()
def get_home_page(db: Session) -> Page:
    # page d'accueil, créée au premier accès
    page = db.query(Page).filter(Page.slug == settings.HOME_SLUG).first()
    if page:
        return page

    try:
        with atomic(db):
            db.add(Page(slug=settings.HOME_SLUG, title=settings.DEFAULT_PAGE_TITLE))
    except ConflictError:
        logger.info("Home page already created by a concurrent request")

    page = db.query(Page).filter(Page.slug == settings.HOME_SLUG).first()
    if not page:
        raise InternalError("Failed to create home page.")
    return page

# func 2: get_page_with_blocks()
def get_page_with_blocks(db: Session, page_id: int) -> Tuple[Page, List[Block]]:
    page = db.query(Page).filter(Page.id == page_id).first()
    if not page:
        raise NotFoundError("Page not found.")
    return page, list_blocks(db, page.id)

# func 3: update_page_title()
def update_page_title(db: Session, page_id: int, title: str) -> Page:
    title = title.strip()
    if not title or len(title) > TITLE_MAX_LENGTH:
        raise InvalidArgumentError(f"Title must be between 1 and {TITLE_MAX_LENGTH} characters.")

    with atomic(db):
        page = db.query(Page).filter(Page.id == page_id).first()
        if not page:
            # id inconnu (page recréée, client en retard): on retombe sur la page d'accueil
            page = db.query(Page).filter(Page.slug == settings.HOME_SLUG).first()
        if not page:
            raise NotFoundError("Page not found.")
        page.title = title

    db.refresh(page)
    return page
