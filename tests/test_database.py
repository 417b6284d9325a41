# tests/test_database.py

"""
데이터베이스 시작 대기(wait_for_database)와 트랜잭션 헬퍼(transactional)에 대한 테스트 모듈입니다.
"""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import transactional
from app.core.database import wait_for_database
from app.core.exceptions import PersistenceError
from app.domains.cms import models as cms_models

from tests.conftest import test_engine as reachable_engine


@pytest.mark.asyncio
async def test_wait_for_database_succeeds_on_reachable_engine():
    await wait_for_database(reachable_engine, retries=1, backoff_seconds=0)


@pytest.mark.asyncio
async def test_wait_for_database_raises_after_retries(tmp_path):
    unreachable = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path}/missing-dir/db.sqlite3",
        poolclass=NullPool,
    )
    try:
        with pytest.raises(OperationalError):
            await wait_for_database(unreachable, retries=2, backoff_seconds=0)
    finally:
        await unreachable.dispose()


@pytest.mark.asyncio
async def test_transactional_rolls_back_and_wraps_persistence_errors(db_session: AsyncSession):
    """
    Given: 같은 slug의 CMS 페이지 두 개를 한 트랜잭션에서 추가
    When:  커밋 시 기본 키 충돌이 발생하면
    Then:  PersistenceError로 변환되고 어떤 행도 저장되지 않습니다.
    """
    with pytest.raises(PersistenceError):
        async with transactional(db_session):
            db_session.add(cms_models.CmsPage(slug="dup", title="A", image_url="/a.png"))
            await db_session.flush()
            db_session.add(cms_models.CmsPage(slug="dup-2", title="B", image_url="/b.png"))
            await db_session.flush()
            db_session.add(cms_models.CmsPage(slug="dup", title="C", image_url="/c.png"))

    result = await db_session.execute(select(cms_models.CmsPage))
    assert result.scalars().all() == []
