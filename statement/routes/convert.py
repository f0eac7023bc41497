from __future__ import annotations

import asyncio
import logging
from urllib.parse import quote

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from statement.application import ConversionRequest, get_conversion_service
from statement.core.errors import StatementError
from statement.routes.uploads import as_http_error, read_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])

CONVERSION_FAILED_MESSAGE = "파일 변환 중 오류가 발생했습니다."
MISSING_SHEET_MESSAGE = "시트 이름이 지정되지 않았습니다."


@router.post("/convert")
async def convert_sheet(
    file: UploadFile | None = File(default=None),
    sheet_name: str | None = Form(default=None, alias="sheetName"),
    output_format: str = Form(default="xlsx", alias="format"),
) -> Response:
    """Convert one attendance sheet into a downloadable detailed statement."""
    filename, content = await read_upload(file)
    if not sheet_name:
        raise HTTPException(status_code=400, detail=MISSING_SHEET_MESSAGE)

    request = ConversionRequest(
        filename=filename,
        content=content,
        sheet_name=sheet_name,
        output_format=output_format,
    )
    service = get_conversion_service()
    try:
        result = await asyncio.to_thread(service.convert, request)
    except StatementError as exc:
        raise as_http_error(exc) from exc
    except Exception as exc:
        logger.exception("conversion failed for %r", filename)
        raise HTTPException(status_code=500, detail=CONVERSION_FAILED_MESSAGE) from exc

    return Response(
        content=result.payload,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(result.filename)}",
            "X-Total-Rows": str(result.total_rows),
        },
    )
