from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from statement.application import get_conversion_service
from statement.core.errors import StatementError, WorkbookReadError
from statement.routes.uploads import as_http_error, read_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sheets"])


@router.post("/sheets")
async def list_sheets(file: UploadFile | None = File(default=None)) -> dict:
    """List the sheets of an uploaded workbook so the caller can pick one."""
    filename, content = await read_upload(file)
    service = get_conversion_service()
    try:
        sheets = await asyncio.to_thread(service.list_sheets, filename, content)
    except StatementError as exc:
        raise as_http_error(exc) from exc
    except Exception as exc:
        logger.exception("sheet listing failed for %r", filename)
        raise HTTPException(status_code=500, detail=WorkbookReadError.message) from exc
    return {"sheets": [sheet.model_dump() for sheet in sheets], "filename": filename}
