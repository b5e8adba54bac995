# Launch item store: list, create and trigger launcher shortcuts.

from __future__ import annotations

import logging

from deskdash.models import ItemId, LaunchItem, LaunchItemDraft
from deskdash.stores.base import CollectionStore, InvalidLaunchItemError

logger = logging.getLogger(__name__)


class LaunchItemStore(CollectionStore):
    """Operations over the remote ``/launch-items`` collection.

    The store never caches. ``create`` and ``trigger`` return nothing; callers
    re-list to see the server-assigned id.
    """

    endpoint = "/launch-items"
    model = LaunchItem

    async def list_all(self) -> list[LaunchItem]:
        return await super().list_all()

    async def create(self, name: str, path: str) -> None:
        if not name.strip():
            raise InvalidLaunchItemError("Please enter a launcher name")
        if not path.strip():
            raise InvalidLaunchItemError("Please enter a launcher path")
        draft = LaunchItemDraft(name=name, path=path)
        await self.client.post(self.endpoint, json=draft.model_dump())
        logger.info("Created launcher %r", name)

    async def trigger(self, item_id: ItemId) -> None:
        await self.client.post(f"/launch/id/{item_id}")
        logger.info("Triggered launcher %s", item_id)
