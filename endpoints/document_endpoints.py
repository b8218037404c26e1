from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import FileResponse, HTMLResponse

from documents.handlers import HandlerOutcome, OutcomeStatus, handle_load, handle_save
from persistence.repositories import build_document_store
from settings import get_settings

router = APIRouter(tags=["documents"])
logger = logging.getLogger(__name__)

SETTINGS = get_settings()
DEBUG_LOG_REQUESTS = SETTINGS.debug_log_requests

DOCUMENT_STORE = build_document_store(SETTINGS)

HTTP_STATUS = {
    OutcomeStatus.OK: 200,
    OutcomeStatus.BAD_REQUEST: 400,
    OutcomeStatus.NOT_FOUND: 404,
    OutcomeStatus.FAILED: 500,
}

PLACEHOLDER_INDEX = """
<!doctype html>
<html>
  <head><meta charset="utf-8"><title>Document Editor</title></head>
  <body>
    <h2>Document Editor</h2>
    <p>No editor page is installed. POST to <code>/LoadFile</code> and <code>/SaveFile</code>.</p>
  </body>
</html>
""".strip()


def _to_response(op: str, outcome: HandlerOutcome) -> Response:
    status_code = HTTP_STATUS[outcome.status]
    if DEBUG_LOG_REQUESTS:
        logger.info("%s: status=%s bytes=%d", op, status_code, len(outcome.body))
    return Response(content=outcome.body, status_code=status_code, media_type="application/json")


@router.get("/", include_in_schema=False)
async def index() -> Response:
    page = SETTINGS.index_page
    if page.is_file():
        return FileResponse(page, media_type="text/html")
    return HTMLResponse(PLACEHOLDER_INDEX, status_code=200)


@router.post("/LoadFile")
async def load_file(request: Request) -> Response:
    raw = await request.body()
    return _to_response("LOAD FILE", await handle_load(raw, DOCUMENT_STORE))


@router.post("/SaveFile")
async def save_file(request: Request) -> Response:
    raw = await request.body()
    return _to_response("SAVE FILE", await handle_save(raw, DOCUMENT_STORE))


# Route names used by older editor builds.
@router.post("/GetFile", include_in_schema=False)
async def get_file(request: Request) -> Response:
    return await load_file(request)


@router.post("/UpdateFile", include_in_schema=False)
async def update_file(request: Request) -> Response:
    return await save_file(request)
