# app/core/seed.py

"""
최초 기동 시 비어 있는 테이블을 기본 콘텐츠로 채우는 모듈입니다.
이미 데이터가 있는 테이블은 건드리지 않으므로 여러 번 실행해도 안전합니다.
"""

import logging
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.cms import services as cms_services
from app.domains.site import services as site_services

logger = logging.getLogger(__name__)


async def seed_database_if_needed(db: AsyncSession) -> List[str]:
    seeded = await site_services.seed_site_defaults(db)
    seeded += await cms_services.seed_cms_defaults(db)
    if seeded:
        logger.info("기본 콘텐츠 시드 완료: %s", ", ".join(seeded))
    else:
        logger.info("기본 콘텐츠 시드 생략 (모든 테이블에 데이터 존재)")
    return seeded
