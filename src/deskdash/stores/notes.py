# Note store: list, create, update and delete notes.

from __future__ import annotations

import logging

from deskdash.models import ItemId, Note, NoteDraft
from deskdash.stores.base import CollectionStore, InvalidNoteError

logger = logging.getLogger(__name__)

EMPTY_CONTENT_MESSAGE = "Please enter note content"


def _draft(title: str | None, content: str) -> NoteDraft:
    if not content or not content.strip():
        raise InvalidNoteError(EMPTY_CONTENT_MESSAGE)
    return NoteDraft(title=title or "", content=content)


class NoteStore(CollectionStore):
    """Operations over the remote ``/notes`` collection."""

    endpoint = "/notes"
    model = Note

    async def list_all(self) -> list[Note]:
        return await super().list_all()

    async def create(self, title: str | None, content: str) -> None:
        draft = _draft(title, content)
        await self.client.post(self.endpoint, json=draft.model_dump())
        logger.info("Created note %r", draft.title)

    async def update(self, note_id: ItemId, title: str | None, content: str) -> None:
        draft = _draft(title, content)
        await self.client.put(f"{self.endpoint}/{note_id}", json=draft.model_dump())
        logger.info("Updated note %s", note_id)

    async def delete(self, note_id: ItemId) -> None:
        await self.client.delete(f"{self.endpoint}/{note_id}")
        logger.info("Deleted note %s", note_id)
