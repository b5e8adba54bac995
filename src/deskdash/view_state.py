"""Dashboard view state: cached collections, loading and error flags.

ViewState is the composition root of the client. It owns the launch item and
note caches, fills them on :meth:`ViewState.load`, and keeps them consistent
with the service after each mutation:

- creates re-list the affected collection;
- note deletes remove the note locally first, and re-list only when the
  DELETE fails;
- launching never touches a cache.

Failures of the initial load degrade to an empty collection. Failures of a
mutation are surfaced through :attr:`ViewState.error`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from deskdash.client.errors import RemoteError
from deskdash.client.remote import RemoteClient
from deskdash.config import Settings, get_settings
from deskdash.models import ItemId, LaunchItem, Note
from deskdash.stores import LaunchItemStore, NoteStore, ValidationFailure

logger = logging.getLogger(__name__)

LAUNCH_ITEMS = "launch items"
NOTES = "notes"


class Phase(str, Enum):
    INITIALIZING = "initializing"
    READY = "ready"


@dataclass(frozen=True)
class ViewSnapshot:
    """What the presentation layer renders."""

    loading: bool
    error: str | None
    launch_items: tuple[LaunchItem, ...] = ()
    notes: tuple[Note, ...] = ()
    load_failures: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "loading": self.loading,
            "error": self.error,
            "launchItems": [item.model_dump() for item in self.launch_items],
            "notes": [note.model_dump() for note in self.notes],
        }


class ViewState:
    def __init__(
        self,
        launch_store: LaunchItemStore,
        note_store: NoteStore,
        *,
        client: RemoteClient | None = None,
    ) -> None:
        self.launch_store = launch_store
        self.note_store = note_store
        self._client = client

        self.phase = Phase.INITIALIZING
        self.loading = False
        self.error: str | None = None
        self.launch_items: list[LaunchItem] = []
        self.notes: list[Note] = []
        self.load_failures: tuple[str, ...] = ()
        self._pending_mutations = 0

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **client_kwargs: Any) -> ViewState:
        """Build a ViewState whose two stores share one RemoteClient."""
        settings = settings or get_settings()
        client = RemoteClient(settings.api_base_url, settings.request_timeout, **client_kwargs)
        return cls(LaunchItemStore(client), NoteStore(client), client=client)

    async def __aenter__(self) -> ViewState:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    @property
    def mutating(self) -> bool:
        return self._pending_mutations > 0

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            loading=self.loading,
            error=self.error,
            launch_items=tuple(self.launch_items),
            notes=tuple(self.notes),
            load_failures=self.load_failures,
        )

    # ------------------------------------------------------------------
    # Initial load
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """Fetch both collections concurrently; a failed fetch yields ``[]``."""
        self.phase = Phase.INITIALIZING
        self.loading = True
        self.error = None
        try:
            launch_task = asyncio.create_task(self._load_collection(LAUNCH_ITEMS))
            notes_task = asyncio.create_task(self._load_collection(NOTES))
            (launch_items, launch_ok), (notes, notes_ok) = await asyncio.gather(
                launch_task, notes_task
            )
        finally:
            self.loading = False

        self.launch_items = launch_items
        self.notes = notes
        self.load_failures = tuple(
            name for name, ok in ((LAUNCH_ITEMS, launch_ok), (NOTES, notes_ok)) if not ok
        )
        self.phase = Phase.READY
        logger.info(
            "Dashboard ready: %d launch items, %d notes%s",
            len(self.launch_items),
            len(self.notes),
            f" (degraded: {', '.join(self.load_failures)})" if self.load_failures else "",
        )

    async def _load_collection(self, name: str) -> tuple[list[Any], bool]:
        store = self.launch_store if name == LAUNCH_ITEMS else self.note_store
        try:
            return await store.list_all(), True
        except RemoteError as e:
            logger.warning("Could not load %s, showing none: %s", name, e.message)
            return [], False

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _begin_mutation(self) -> None:
        self._pending_mutations += 1
        self.error = None

    def _end_mutation(self) -> None:
        self._pending_mutations -= 1

    def _fail(self, message: str) -> bool:
        logger.warning(message)
        self.error = message
        return False

    async def _refresh_launch_items(self) -> str | None:
        try:
            self.launch_items = await self.launch_store.list_all()
        except RemoteError as e:
            return f"Could not refresh {LAUNCH_ITEMS}: {e.message}"
        return None

    async def _refresh_notes(self) -> str | None:
        try:
            self.notes = await self.note_store.list_all()
        except RemoteError as e:
            return f"Could not refresh {NOTES}: {e.message}"
        return None

    async def add_launcher(self, name: str, path: str) -> bool:
        self._begin_mutation()
        try:
            try:
                await self.launch_store.create(name, path)
            except ValidationFailure as e:
                return self._fail(e.message)
            except RemoteError as e:
                return self._fail(f"Failed to add launcher: {e.message}")

            refresh_error = await self._refresh_launch_items()
            if refresh_error:
                return self._fail(refresh_error)
            return True
        finally:
            self._end_mutation()

    async def launch(self, item_id: ItemId) -> bool:
        self._begin_mutation()
        try:
            await self.launch_store.trigger(item_id)
        except RemoteError as e:
            return self._fail(f"Failed to launch {self._launch_label(item_id)}: {e.message}")
        finally:
            self._end_mutation()
        return True

    def _launch_label(self, item_id: ItemId) -> str:
        for item in self.launch_items:
            if item.id == item_id:
                return item.name
        return str(item_id)

    async def add_note(self, title: str | None, content: str) -> bool:
        self._begin_mutation()
        try:
            try:
                await self.note_store.create(title, content)
            except ValidationFailure as e:
                return self._fail(e.message)
            except RemoteError as e:
                return self._fail(f"Failed to add note: {e.message}")

            refresh_error = await self._refresh_notes()
            if refresh_error:
                return self._fail(refresh_error)
            return True
        finally:
            self._end_mutation()

    async def delete_note(self, note_id: ItemId) -> bool:
        """Delete a note optimistically.

        The note leaves the cache before the DELETE is sent. If the DELETE
        fails, the error is surfaced and one corrective re-list is issued; if
        that also fails the optimistic cache is kept and both failures are
        reported.
        """
        self._begin_mutation()
        try:
            self.notes = [note for note in self.notes if note.id != note_id]
            try:
                await self.note_store.delete(note_id)
            except RemoteError as e:
                message = f"Failed to delete note: {e.message}"
                refresh_error = await self._refresh_notes()
                if refresh_error:
                    message = f"{message}. {refresh_error}"
                return self._fail(message)
            return True
        finally:
            self._end_mutation()

    # ------------------------------------------------------------------
    # Presentation intents
    # ------------------------------------------------------------------

    async def on_launch(self, item_id: ItemId) -> bool:
        return await self.launch(item_id)

    async def on_add_launcher(self, name: str, path: str) -> bool:
        return await self.add_launcher(name, path)

    async def on_add_note(self, title: str | None, content: str) -> bool:
        return await self.add_note(title, content)

    async def on_delete_note(self, note_id: ItemId) -> bool:
        return await self.delete_note(note_id)
