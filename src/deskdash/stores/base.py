"""Shared pieces of the collection stores."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from deskdash.client.errors import ServiceError
from deskdash.client.remote import UNEXPECTED_RESPONSE_MESSAGE, RemoteClient
from deskdash.models import parse_collection

logger = logging.getLogger(__name__)


class ValidationFailure(ValueError):
    """Input rejected locally, before any request was sent."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidNoteError(ValidationFailure):
    pass


class InvalidLaunchItemError(ValidationFailure):
    pass


class CollectionStore:
    """Base for stores wrapping one remote collection endpoint."""

    endpoint: str = ""
    model: type[BaseModel]

    def __init__(self, client: RemoteClient) -> None:
        self.client = client

    async def list_all(self) -> list[Any]:
        body = await self.client.get(self.endpoint)
        try:
            items = parse_collection(body, self.model)
        except ValueError as e:
            logger.warning("Unusable %s body: %s", self.endpoint, e)
            raise ServiceError(200, UNEXPECTED_RESPONSE_MESSAGE) from e
        logger.debug("Fetched %d entries from %s", len(items), self.endpoint)
        return items
