# tests/domains/test_shared_n.py

"""
'shared' 도메인 (업로드 파일 저장, 미사용 업로드 정리)에 대한 테스트 모듈입니다.

- 검사 순서: 확장자 -> 빈 파일 -> 최대 크기.
- 저장 경로와 공개 URL 형식.
- 참조되지 않는 업로드 파일 탐색.
"""

import os
import time
from pathlib import Path

import pytest
from httpx import AsyncClient

from app.core.config import settings
from app.core.exceptions import UploadTooLargeError, ValidationError
from app.domains.shared import services as shared_services
from app.domains.shared import tasks as shared_tasks
from app.domains.shared.schemas import UploadKind

ADMIN = "/api/v1/admin"


# --- 파일명 정리 ---

def test_sanitize_file_name_strips_path_and_unsafe_chars():
    assert shared_services.sanitize_file_name("../../etc/passwd") == "passwd"
    assert shared_services.sanitize_file_name("C:\\docs\\견적 요청서.pdf") == "_.pdf"
    assert shared_services.sanitize_file_name("my report (v2).PDF") == "my_report_v2_.PDF"
    assert shared_services.sanitize_file_name(None) == "file"


# --- 저장 서비스 ---

@pytest.mark.asyncio
async def test_store_upload_file_writes_under_kind_directory(upload_dir: Path):
    stored = await shared_services.store_upload_file(UploadKind.INQUIRY, b"hello", "Quote.PDF", "application/pdf")

    assert stored.url.startswith(f"{settings.UPLOAD_URL_PREFIX}/inquiry/")
    assert stored.url.endswith(".pdf")
    assert stored.original_name == "Quote.PDF"
    assert stored.size == 5
    assert stored.mime_type == "application/pdf"

    stored_name = stored.url.rsplit("/", 1)[-1]
    assert (upload_dir / "inquiry" / stored_name).read_bytes() == b"hello"


@pytest.mark.asyncio
async def test_store_upload_file_defaults_mime_type():
    stored = await shared_services.store_upload_file(UploadKind.RESOURCE, b"# title", "readme.md", None)

    assert stored.mime_type == "application/octet-stream"


@pytest.mark.asyncio
async def test_extension_is_checked_before_emptiness():
    """허용되지 않은 확장자의 빈 파일은 크기가 아닌 확장자 오류로 거절됩니다."""
    with pytest.raises(ValidationError) as exc_info:
        await shared_services.store_upload_file(UploadKind.INQUIRY, b"", "run.exe", None)

    assert not isinstance(exc_info.value, UploadTooLargeError)
    assert "extension" in exc_info.value.message


@pytest.mark.asyncio
async def test_resource_only_extension_is_rejected_for_inquiry():
    with pytest.raises(ValidationError):
        await shared_services.store_upload_file(UploadKind.INQUIRY, b"text", "notes.hwp", None)

    stored = await shared_services.store_upload_file(UploadKind.RESOURCE, b"text", "notes.hwp", None)
    assert stored.url.endswith(".hwp")


@pytest.mark.asyncio
async def test_empty_file_is_rejected(upload_dir: Path):
    with pytest.raises(ValidationError) as exc_info:
        await shared_services.store_upload_file(UploadKind.INQUIRY, b"", "empty.pdf", None)

    assert exc_info.value.message == "File is empty"
    assert not (upload_dir / "inquiry").exists()


@pytest.mark.asyncio
async def test_oversized_file_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "MAX_INQUIRY_FILE_BYTES", 4)

    with pytest.raises(UploadTooLargeError):
        await shared_services.store_upload_file(UploadKind.INQUIRY, b"12345", "big.pdf", None)

    stored = await shared_services.store_upload_file(UploadKind.INQUIRY, b"1234", "fits.pdf", None)
    assert stored.size == 4


# --- 업로드 API ---

@pytest.mark.asyncio
async def test_upload_inquiry_file_endpoint(client: AsyncClient):
    response = await client.post(
        "/api/v1/uploads/inquiry",
        files={"file": ("drawing.png", b"\x89PNG fake", "image/png")},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["url"].startswith("/files/inquiry/")
    assert body["original_name"] == "drawing.png"
    assert body["mime_type"] == "image/png"


@pytest.mark.asyncio
async def test_upload_endpoint_status_codes(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "MAX_INQUIRY_FILE_BYTES", 3)

    bad_ext = await client.post("/api/v1/uploads/inquiry", files={"file": ("a.exe", b"12", "application/x-msdownload")})
    empty = await client.post("/api/v1/uploads/inquiry", files={"file": ("a.pdf", b"", "application/pdf")})
    too_big = await client.post("/api/v1/uploads/inquiry", files={"file": ("a.pdf", b"1234", "application/pdf")})
    missing = await client.post("/api/v1/uploads/inquiry")

    assert bad_ext.status_code == 400
    assert empty.status_code == 400
    assert too_big.status_code == 413
    assert missing.status_code == 400


@pytest.mark.asyncio
async def test_resource_upload_requires_admin(client: AsyncClient):
    response = await client.post(
        f"{ADMIN}/uploads/resource",
        files={"file": ("catalog.pdf", b"%PDF", "application/pdf")},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_resource_upload_as_admin(admin_client: AsyncClient):
    response = await admin_client.post(
        f"{ADMIN}/uploads/resource",
        files={"file": ("catalog.pdf", b"%PDF", "application/pdf")},
    )

    assert response.status_code == 201
    assert response.json()["url"].startswith("/files/resource/")


# --- 미사용 업로드 정리 ---

@pytest.mark.asyncio
async def test_find_orphan_upload_files_skips_referenced_and_recent(upload_dir: Path):
    referenced = await shared_services.store_upload_file(UploadKind.RESOURCE, b"a", "a.pdf", None)
    orphan = await shared_services.store_upload_file(UploadKind.RESOURCE, b"b", "b.pdf", None)
    recent = await shared_services.store_upload_file(UploadKind.INQUIRY, b"c", "c.pdf", None)

    old = time.time() - shared_tasks.ORPHAN_GRACE_SECONDS - 60
    for stored in (referenced, orphan):
        path = upload_dir / "resource" / stored.url.rsplit("/", 1)[-1]
        os.utime(path, (old, old))

    orphans = shared_tasks.find_orphan_upload_files(upload_dir, {referenced.url})

    assert [p.name for p in orphans] == [orphan.url.rsplit("/", 1)[-1]]
    assert recent.url.rsplit("/", 1)[-1] not in {p.name for p in orphans}
