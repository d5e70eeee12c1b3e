import logging
import uuid

from tidydesk.extensions import db
from tidydesk.notes.models import Note
from tidydesk.common.errors import InvalidInputError, NotFoundError
from tidydesk.common.utils import is_blank

logger = logging.getLogger(__name__)


def _require_fields(title: str, content: str) -> None:
    missing = [name for name, value in (("title", title), ("content", content)) if is_blank(value)]
    if missing:
        raise InvalidInputError(
            "Title and content are required.",
            details={name: ["Must not be blank."] for name in missing},
        )


def create_note(owner_email: str, title: str, content: str) -> Note:
    _require_fields(title, content)
    note = Note(title=title, content=content, owner_email=owner_email)
    db.session.add(note)
    db.session.commit()
    logger.info("note_created", extra={"note_id": str(note.id)})
    return note


def list_notes(owner_email: str) -> list[Note]:
    # plus récentes d'abord
    return (
        Note.query.filter_by(owner_email=owner_email)
        .order_by(Note.created_at.desc())
        .all()
    )


def get_note(owner_email: str, note_id: uuid.UUID) -> Note:
    note = Note.query.filter_by(id=note_id, owner_email=owner_email).first()
    if note is None:
        raise NotFoundError("Note not found.")
    return note


def update_note(owner_email: str, note_id: uuid.UUID, title: str, content: str) -> Note:
    note = get_note(owner_email, note_id)
    _require_fields(title, content)
    note.title = title
    note.content = content
    db.session.commit()
    logger.info("note_updated", extra={"note_id": str(note.id)})
    return note


def delete_note(owner_email: str, note_id: uuid.UUID) -> None:
    note = get_note(owner_email, note_id)
    db.session.delete(note)
    db.session.commit()
    logger.info("note_deleted", extra={"note_id": str(note_id)})
