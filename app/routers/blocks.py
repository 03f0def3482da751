from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.schemas.block import BlockCreate, BlockUpdate, BlockMove, BlockMoveResponse, BlockResponse
from app.services import block_service
from typing import List

router = APIRouter(prefix="/blocks", tags=["blocks"])

@router.post("/pages/{page_id}/blocks", response_model=BlockResponse, status_code=status.HTTP_201_CREATED)
def create_block(page_id: int, block_data: BlockCreate, db: Session = Depends(get_db)):
    """Créer un block: en fin de page, ou juste après insert_after_block_id"""
    if block_data.insert_after_block_id is None:
        return block_service.append_block(db, page_id, block_data.payload)
    return block_service.insert_block_after(db, page_id, block_data.insert_after_block_id, block_data.payload)

@router.get("/pages/{page_id}/blocks", response_model=List[BlockResponse])
def list_blocks(page_id: int, db: Session = Depends(get_db)):
    """Récupérer tous les blocks d'une page, dans l'ordre"""
    return block_service.list_blocks(db, page_id)

@router.put("/{block_id}", response_model=BlockResponse)
def update_block(block_id: int, block_data: BlockUpdate, db: Session = Depends(get_db)):
    """Modifier le contenu d'un block (le type ne change pas)"""
    return block_service.update_block_content(db, block_id, block_data.payload)

@router.delete("/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_block(block_id: int, db: Session = Depends(get_db)):
    """Supprimer un block"""
    block_service.delete_block(db, block_id)

@router.post("/{block_id}/move", response_model=BlockMoveResponse)
def move_block(block_id: int, move: BlockMove, db: Session = Depends(get_db)):
    """Monter ou descendre un block d'un cran"""
    moved = block_service.move_block(db, block_id, move.direction)
    return {"moved": moved}
