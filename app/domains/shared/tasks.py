# app/domains/shared/tasks.py

import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional, Set

from sqlmodel import select

from app.core.database import get_async_session_context
from app.domains.cms import models as cms_models
from app.domains.inq import models as inq_models
from .schemas import UploadKind
from .services import build_public_url, get_upload_root

logger = logging.getLogger(__name__)

# 업로드 직후 아직 문의/자료에 연결되지 않은 파일은 이 시간 동안 보존합니다.
ORPHAN_GRACE_SECONDS = 24 * 60 * 60


def find_orphan_upload_files(
    upload_root: Path,
    referenced_urls: Set[str],
    *,
    now: Optional[float] = None,
    grace_seconds: int = ORPHAN_GRACE_SECONDS,
) -> List[Path]:
    """
    어디에서도 참조하지 않고 유예 시간이 지난 업로드 파일 경로 목록을 반환합니다.
    """
    now = time.time() if now is None else now
    orphans: List[Path] = []
    for kind in UploadKind:
        directory = upload_root / kind.value
        if not directory.is_dir():
            continue
        for file_path in directory.iterdir():
            if not file_path.is_file():
                continue
            if build_public_url(kind, file_path.name) in referenced_urls:
                continue
            if now - file_path.stat().st_mtime < grace_seconds:
                continue
            orphans.append(file_path)
    return orphans


def _non_empty(values: Iterable[Optional[str]]) -> Set[str]:
    return {v for v in values if v}


async def cleanup_orphan_uploads_task(ctx):
    """
    ARQ 워커에 의해 실행될, 자료(file_url)와 문의 첨부파일(attachment_url) 어디에서도
    참조하지 않는 업로드 파일을 삭제하는 태스크 함수.
    """
    logger.info("ARQ 태스크: 사용되지 않는 업로드 파일 정리 시작")

    async with get_async_session_context() as session:
        resource_urls = await session.execute(select(cms_models.Resource.file_url))
        attachment_urls = await session.execute(select(inq_models.Inquiry.attachment_url))
        referenced = _non_empty(resource_urls.scalars().all()) | _non_empty(attachment_urls.scalars().all())

    orphans = find_orphan_upload_files(get_upload_root(), referenced)
    if not orphans:
        logger.info("삭제할 업로드 파일이 없습니다.")
        return {"status": "success", "message": "삭제할 파일이 없습니다.", "deleted_count": 0}

    deleted_count = 0
    for file_path in orphans:
        try:
            file_path.unlink()
            deleted_count += 1
        except OSError as e:
            logger.error("업로드 파일 삭제 실패 (%s): %s", file_path, e)

    logger.info("총 %d개의 사용되지 않는 업로드 파일 정리 완료", deleted_count)
    return {"status": "success", "message": "업로드 파일 정리 완료", "deleted_count": deleted_count}
