from __future__ import annotations


class StatementError(Exception):
    """Base class for conversion failures that are reported to the caller."""

    message = "파일 변환 중 오류가 발생했습니다."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class EmptySheetError(StatementError):
    """Raised when no attendance rows could be reconstructed from a sheet."""

    message = "시트에서 데이터를 찾을 수 없습니다."


class SheetNotFoundError(StatementError):
    message = "지정된 시트를 찾을 수 없습니다."


class NoSheetsError(StatementError):
    message = "엑셀 파일에 시트가 없습니다."


class WorkbookReadError(StatementError):
    message = "파일을 읽는 중 오류가 발생했습니다."


class UploadTooLargeError(StatementError):
    message = "업로드 가능한 파일 크기를 초과했습니다."
