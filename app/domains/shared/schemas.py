# app/domains/shared/schemas.py

from enum import Enum

from sqlmodel import SQLModel, Field


class UploadKind(str, Enum):
    INQUIRY = "inquiry"
    RESOURCE = "resource"


class StoredUploadFile(SQLModel):
    """
    저장된 업로드 파일의 메타데이터입니다.
    url은 정적 파일 경로이며, 문의 첨부파일 / 자료 file_url에 그대로 사용됩니다.
    """
    url: str = Field(..., description="공개 URL (예: /files/inquiry/<uuid>.pdf)")
    original_name: str = Field(..., description="정리된 원본 파일명")
    size: int = Field(..., ge=1, description="파일 크기 (bytes)")
    mime_type: str = Field(..., description="MIME 타입")
