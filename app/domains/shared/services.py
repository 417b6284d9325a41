# app/domains/shared/services.py

"""
업로드 파일 저장 서비스입니다.

검사 순서: 확장자 -> 빈 파일 -> 최대 크기.
저장 위치: {UPLOAD_DIR}/{kind}/{uuid}{ext}
공개 URL: {UPLOAD_URL_PREFIX}/{kind}/{uuid}{ext}
"""

import logging
import re
import uuid
from pathlib import Path, PurePath
from typing import Dict, FrozenSet, Optional

import aiofiles
from fastapi import UploadFile

from app.core.config import settings
from app.core.exceptions import PersistenceError, UploadTooLargeError, ValidationError
from .schemas import StoredUploadFile, UploadKind

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

INQUIRY_ALLOWED_EXTENSIONS: FrozenSet[str] = frozenset({
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    ".png", ".jpg", ".jpeg", ".gif", ".webp", ".zip",
})
RESOURCE_ALLOWED_EXTENSIONS: FrozenSet[str] = INQUIRY_ALLOWED_EXTENSIONS | {".hwp", ".txt", ".md"}

ALLOWED_EXTENSIONS: Dict[UploadKind, FrozenSet[str]] = {
    UploadKind.INQUIRY: INQUIRY_ALLOWED_EXTENSIONS,
    UploadKind.RESOURCE: RESOURCE_ALLOWED_EXTENSIONS,
}

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def sanitize_file_name(file_name: Optional[str]) -> str:
    """
    경로 구성요소를 제거하고 영문/숫자/._- 외의 문자는 '_'로 바꿉니다.
    """
    base_name = PurePath((file_name or "file").replace("\\", "/")).name or "file"
    return _REPEATED_UNDERSCORES.sub("_", _UNSAFE_CHARS.sub("_", base_name))


def get_max_bytes(kind: UploadKind) -> int:
    if kind == UploadKind.INQUIRY:
        return settings.MAX_INQUIRY_FILE_BYTES
    return settings.MAX_RESOURCE_FILE_BYTES


def get_upload_root() -> Path:
    # monkeypatch로 변경된 settings 값을 참조하도록 호출 시점에 계산합니다.
    return Path(settings.UPLOAD_DIR)


def build_public_url(kind: UploadKind, stored_name: str) -> str:
    return f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{kind.value}/{stored_name}"


async def store_upload_file(
    kind: UploadKind,
    content: bytes,
    original_name: Optional[str],
    mime_type: Optional[str],
) -> StoredUploadFile:
    """
    파일 내용을 검사한 뒤 디스크에 저장하고 메타데이터를 반환합니다.
    """
    safe_original = sanitize_file_name(original_name)
    extension = PurePath(safe_original).suffix.lower()

    if not extension or extension not in ALLOWED_EXTENSIONS[kind]:
        raise ValidationError(
            f"Unsupported file extension: {extension or '(none)'}",
            issues=[{"path": "file", "message": f"Unsupported file extension: {extension or '(none)'}"}],
        )
    if not content:
        raise ValidationError("File is empty", issues=[{"path": "file", "message": "File is empty"}])
    max_bytes = get_max_bytes(kind)
    if len(content) > max_bytes:
        raise UploadTooLargeError(
            f"File is too large. Max allowed bytes: {max_bytes}",
            issues=[{"path": "file", "message": f"Max allowed bytes: {max_bytes}"}],
        )

    directory = get_upload_root() / kind.value
    directory.mkdir(parents=True, exist_ok=True)
    stored_name = f"{uuid.uuid4()}{extension}"

    try:
        async with aiofiles.open(directory / stored_name, "wb") as f:
            await f.write(content)
    except OSError as e:
        logger.error("업로드 파일 저장 실패 (%s): %s", kind.value, e)
        raise PersistenceError(f"Failed to store upload file: {e}") from e

    logger.info("업로드 파일 저장: %s/%s (%d bytes)", kind.value, stored_name, len(content))
    return StoredUploadFile(
        url=build_public_url(kind, stored_name),
        original_name=safe_original,
        size=len(content),
        mime_type=mime_type or DEFAULT_MIME_TYPE,
    )


async def store_uploaded_file(kind: UploadKind, upload_file: UploadFile) -> StoredUploadFile:
    """
    multipart UploadFile을 읽어 store_upload_file로 저장합니다.
    최대 크기보다 1바이트만 더 읽어 초과 여부를 판단합니다.
    """
    content = await upload_file.read(get_max_bytes(kind) + 1)
    return await store_upload_file(kind, content, upload_file.filename, upload_file.content_type)
