from __future__ import annotations

import os

from fastapi import HTTPException, UploadFile

from statement.core.errors import (
    StatementError,
    UploadTooLargeError,
    WorkbookReadError,
)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MISSING_FILE_MESSAGE = "파일이 업로드되지 않았습니다."


def max_upload_bytes() -> int:
    raw = os.getenv("STATEMENT_MAX_UPLOAD_BYTES")
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_MAX_UPLOAD_BYTES


async def read_upload(upload: UploadFile | None) -> tuple[str, bytes]:
    """Return the uploaded filename and content, enforcing the size limit."""

    if upload is None or not upload.filename:
        raise HTTPException(status_code=400, detail=MISSING_FILE_MESSAGE)
    try:
        content = await upload.read(max_upload_bytes() + 1)
    finally:
        await upload.close()
    if len(content) > max_upload_bytes():
        raise as_http_error(UploadTooLargeError())
    return upload.filename, content


def as_http_error(exc: StatementError) -> HTTPException:
    if isinstance(exc, UploadTooLargeError):
        return HTTPException(status_code=413, detail=exc.message)
    if isinstance(exc, WorkbookReadError):
        return HTTPException(status_code=500, detail=exc.message)
    return HTTPException(status_code=400, detail=exc.message)
