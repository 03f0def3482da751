"""
Service d'ordonnancement des blocks d'une page.

Chaque block porte une position entière creuse:
- ajout en fin de page: max(position) + POSITION_STEP
- insertion après un block: milieu entier entre le block et son suivant
- plus d'entier libre entre les deux voisins: on renumérote toute la page
  (reindex) puis on insère à mi-pas après le block de référence

Ordre canonique d'une page: (position, id).
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.core.config import settings
from app.core.database import atomic
from app.core.errors import InternalError, InvalidArgumentError, NotFoundError, TypeMismatchError
from app.models.block import Block
from app.models.page import Page
from app.schemas.block import Direction, ImagePayload, TextPayload

logger = logging.getLogger(__name__)

# position temporaire pendant un échange de deux blocks
SWAP_SENTINEL = -1


def _canonical(query: Query) -> Query:
    return query.order_by(Block.position.asc(), Block.id.asc())


def _lock_page(db: Session, page_id: int) -> Page:
    # verrou ligne sur la page: une seule transaction à la fois calcule des positions pour elle
    page = db.query(Page).filter(Page.id == page_id).with_for_update().first()
    if not page:
        raise NotFoundError("Page not found.")
    return page


def _get_block(db: Session, block_id: int) -> Block:
    block = db.query(Block).filter(Block.id == block_id).populate_existing().first()
    if not block:
        raise NotFoundError("Block not found.")
    return block


def _check_payload(payload) -> None:
    if not isinstance(payload, (TextPayload, ImagePayload)):
        raise InvalidArgumentError(f"Unsupported block payload: {type(payload).__name__}")


def _apply_payload(block: Block, payload) -> None:
    if isinstance(payload, TextPayload):
        block.text = payload.text
        block.text_style = payload.text_style.value
    else:
        block.image_src = payload.image_src
        block.image_width = payload.image_width
        block.image_height = payload.image_height


def _new_block(page_id: int, payload) -> Block:
    _check_payload(payload)
    block = Block(page_id=page_id, type=payload.type)
    _apply_payload(block, payload)
    return block


def _max_position(db: Session, page_id: int) -> int:
    max_position = db.query(func.max(Block.position)).filter(Block.page_id == page_id).scalar()
    return max_position if max_position is not None else 0


def _neighbor(db: Session, block: Block, direction: Direction) -> Optional[Block]:
    query = db.query(Block).filter(Block.page_id == block.page_id)
    if direction == Direction.up:
        return query.filter(Block.position < block.position).order_by(
            Block.position.desc(), Block.id.desc()
        ).first()
    return _canonical(query.filter(Block.position > block.position)).first()


def reindex_page(db: Session, page_id: int) -> Dict[int, int]:
    """Renumérote les blocks d'une page en (rang + 1) * POSITION_STEP.

    Doit tourner dans la transaction de l'appelant. L'ordre canonique est
    conservé tel quel. Retourne {block_id: nouvelle position}.
    """
    step = settings.POSITION_STEP
    ordered = _canonical(db.query(Block).filter(Block.page_id == page_id)).all()
    if not ordered:
        return {}

    # au-delà de toute position actuelle et de toute position cible
    offset = max(settings.REINDEX_OFFSET, ordered[-1].position + 1, len(ordered) * step + 1)
    db.query(Block).filter(Block.page_id == page_id).update(
        {Block.position: Block.position + offset}, synchronize_session="evaluate"
    )

    new_positions = {}
    for rank, block in enumerate(ordered):
        block.position = (rank + 1) * step
        db.flush()  # une requête par ligne, dans l'ordre canonique
        new_positions[block.id] = block.position

    logger.info(f"Reindexed page {page_id}: {len(ordered)} blocks")
    return new_positions


def _position_after(db: Session, current: Block) -> int:
    step = settings.POSITION_STEP
    following = _canonical(
        db.query(Block).filter(
            Block.page_id == current.page_id,
            Block.position > current.position,
        )
    ).first()

    if following is None:
        return current.position + step

    if following.position - current.position > 1:
        return (current.position + following.position) // 2

    # plus aucun entier libre entre current et following
    new_positions = reindex_page(db, current.page_id)
    current_position = new_positions.get(current.id)
    if current_position is None:
        raise InternalError("Failed to reindex blocks.")
    return current_position + step // 2


def append_block(db: Session, page_id: int, payload) -> Block:
    """Ajoute un block en fin de page"""
    with atomic(db):
        _lock_page(db, page_id)
        block = _new_block(page_id, payload)
        block.position = _max_position(db, page_id) + settings.POSITION_STEP
        db.add(block)

    db.refresh(block)
    return block


def insert_block_after(db: Session, page_id: int, after_block_id: int, payload) -> Block:
    """Insère un block juste après after_block_id, reindex de la page si besoin"""
    with atomic(db):
        _lock_page(db, page_id)
        current = _get_block(db, after_block_id)
        if current.page_id != page_id:
            raise InvalidArgumentError("Block does not belong to page.")

        block = _new_block(page_id, payload)
        block.position = _position_after(db, current)
        db.add(block)

    db.refresh(block)
    return block


def update_block_content(db: Session, block_id: int, payload) -> Block:
    _check_payload(payload)
    with atomic(db):
        block = _get_block(db, block_id)
        if block.type != payload.type:
            article = "an" if payload.type == "image" else "a"
            raise TypeMismatchError(f"Block is not {article} {payload.type} block.")
        _apply_payload(block, payload)

    db.refresh(block)
    return block


def delete_block(db: Session, block_id: int) -> None:
    # les positions des autres blocks ne bougent pas, les trous servent aux insertions
    with atomic(db):
        block = _get_block(db, block_id)
        _lock_page(db, block.page_id)
        block = _get_block(db, block_id)
        db.delete(block)


def move_block(db: Session, block_id: int, direction: Direction) -> bool:
    """Échange la position du block avec son voisin du dessus ou du dessous.

    Retourne False si le block est déjà en haut (up) ou en bas (down).
    """
    try:
        direction = Direction(direction)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown direction: {direction}") from e

    with atomic(db):
        current = _get_block(db, block_id)
        _lock_page(db, current.page_id)
        current = _get_block(db, block_id)

        neighbor = _neighbor(db, current, direction)
        if neighbor is None:
            return False

        current_position, neighbor_position = current.position, neighbor.position
        # jamais deux blocks sur la même position, même au milieu de l'échange
        current.position = SWAP_SENTINEL
        db.flush()
        neighbor.position = current_position
        db.flush()
        current.position = neighbor_position
        db.flush()

    logger.debug(f"Moved block {block_id} {direction.value}: {current_position} -> {neighbor_position}")
    return True


def list_blocks(db: Session, page_id: int) -> List[Block]:
    if not db.query(Page).filter(Page.id == page_id).first():
        raise NotFoundError("Page not found.")
    return _canonical(db.query(Block).filter(Block.page_id == page_id)).all()
