from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.schemas.page import PageTitleUpdate, PageResponse, PageWithBlocks
from app.services.page_service import get_home_page, get_page_with_blocks, update_page_title

router = APIRouter(prefix="/pages", tags=["pages"])

# Page d'accueil + ses blocks
@router.get("/home", response_model=PageWithBlocks)
def get_home(db: Session = Depends(get_db)):
    page = get_home_page(db)
    page, blocks = get_page_with_blocks(db, page.id)
    return {"page": page, "blocks": blocks}

@router.put("/{page_id}/title", response_model=PageResponse)
def update_title(page_id: int, page_data: PageTitleUpdate, db: Session = Depends(get_db)):
    # Maj du titre, retombe sur la page d'accueil si page_id est inconnu
    return update_page_title(db, page_id, page_data.title)
