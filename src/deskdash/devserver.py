# Development service: in-memory stand-in for the dashboard API.
# Implements the launch item and note endpoints so the client can run
# locally (`deskdash serve`) and be tested end to end without a real backend.

from __future__ import annotations

import logging
from itertools import count

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from deskdash import __version__
from deskdash.models import LaunchItem, LaunchItemDraft, Note, NoteDraft

logger = logging.getLogger(__name__)


class DevStore:
    """In-memory collections with increasing integer ids."""

    def __init__(self) -> None:
        self.launch_items: list[LaunchItem] = []
        self.notes: list[Note] = []
        self.launched: list[LaunchItem] = []
        self._launch_ids = count(1)
        self._note_ids = count(1)

    def add_launch_item(self, draft: LaunchItemDraft) -> LaunchItem:
        item = LaunchItem(id=next(self._launch_ids), **draft.model_dump())
        self.launch_items.append(item)
        return item

    def add_note(self, draft: NoteDraft) -> Note:
        note = Note(id=next(self._note_ids), **draft.model_dump())
        self.notes.append(note)
        return note

    def find_launch_item(self, item_id: int) -> LaunchItem:
        for item in self.launch_items:
            if item.id == item_id:
                return item
        raise HTTPException(status_code=404, detail="Launch item not found")

    def note_index(self, note_id: int) -> int:
        for index, note in enumerate(self.notes):
            if note.id == note_id:
                return index
        raise HTTPException(status_code=404, detail="Note not found")


def get_store(request: Request) -> DevStore:
    return request.app.state.store


def _require_content(draft: NoteDraft) -> None:
    if not draft.content.strip():
        raise HTTPException(status_code=400, detail="Note content is required")


router = APIRouter()


@router.get("/launch-items", response_model=list[LaunchItem])
async def list_launch_items(store: DevStore = Depends(get_store)):
    return store.launch_items


@router.post("/launch-items", response_model=LaunchItem, status_code=201)
async def create_launch_item(draft: LaunchItemDraft, store: DevStore = Depends(get_store)):
    item = store.add_launch_item(draft)
    logger.info("Added launch item %s: %s", item.id, item.name)
    return item


@router.post("/launch/id/{item_id}")
async def trigger_launch_item(item_id: int, store: DevStore = Depends(get_store)):
    item = store.find_launch_item(item_id)
    store.launched.append(item)
    logger.info("Launching: %s", item.path)
    return {"message": f"Launched {item.name}"}


@router.get("/notes", response_model=list[Note])
async def list_notes(store: DevStore = Depends(get_store)):
    return store.notes


@router.post("/notes", response_model=Note, status_code=201)
async def create_note(draft: NoteDraft, store: DevStore = Depends(get_store)):
    _require_content(draft)
    note = store.add_note(draft)
    logger.info("Added note %s", note.id)
    return note


@router.put("/notes/{note_id}", response_model=Note)
async def update_note(note_id: int, draft: NoteDraft, store: DevStore = Depends(get_store)):
    _require_content(draft)
    index = store.note_index(note_id)
    store.notes[index] = Note(id=note_id, **draft.model_dump())
    return store.notes[index]


@router.delete("/notes/{note_id}")
async def delete_note(note_id: int, store: DevStore = Depends(get_store)):
    del store.notes[store.note_index(note_id)]
    logger.info("Deleted note %s", note_id)
    return {"message": "Note deleted"}


def create_app(store: DevStore | None = None) -> FastAPI:
    app = FastAPI(title="deskdash development service", version=__version__)
    app.state.store = store or DevStore()
    app.include_router(router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=422, content={"message": "Invalid request body"})

    return app
