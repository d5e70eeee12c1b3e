import logging
import uuid

from tidydesk.extensions import summarizer
from tidydesk.notes.service import get_note

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Please summarize the following note:

Title: {title}
Content: {content}"""


def build_prompt(title: str, content: str) -> str:
    return PROMPT_TEMPLATE.format(title=title, content=content)


def summarize_note(owner_email: str, note_id: uuid.UUID) -> str:
    """Résumé IA d'une note du propriétaire.

    Un seul appel au modèle, sans retry ni cache; le texte est renvoyé tel quel.
    NotFoundError si la note est absente ou appartient à quelqu'un d'autre,
    SummarizationError si le modèle échoue.
    """
    note = get_note(owner_email, note_id)
    summary = summarizer.generate(build_prompt(note.title, note.content))
    logger.info("note_summarized", extra={"note_id": str(note.id)})
    return summary
