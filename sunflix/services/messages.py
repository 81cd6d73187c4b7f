"""Contact messages inbox."""

from sqlalchemy.orm import Session

from sunflix.core.exceptions import ValidationError
from sunflix.models import Message
from sunflix.schemas.message import MessageCreate


def list_messages(session: Session) -> list[Message]:
    """All messages, newest first."""
    return session.query(Message).order_by(Message.created_at.desc()).all()


def create_message(session: Session, body: MessageCreate) -> Message:
    if not body.name or not body.email or not body.body:
        raise ValidationError("Missing required fields")
    message = Message(
        name=body.name,
        email=body.email,
        subject=body.subject,
        body=body.body,
    )
    session.add(message)
    session.commit()
    session.refresh(message)
    return message
