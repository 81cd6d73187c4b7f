"""Contact messages."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sunflix.core.database import get_db
from sunflix.schemas.message import MessageCreate, MessageOut
from sunflix.services import messages as messages_service

router = APIRouter()


@router.get("", response_model=list[MessageOut])
def list_messages(db: Annotated[Session, Depends(get_db)]) -> list[MessageOut]:
    return [MessageOut.model_validate(m) for m in messages_service.list_messages(db)]


@router.post("", response_model=MessageOut)
def create_message(
    body: MessageCreate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageOut:
    return MessageOut.model_validate(messages_service.create_message(db, body))
