# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 시작 시 DB 연결을 재시도하며 기다리는 warm-up 함수를 제공합니다.
- 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발/단일 서버용).
"""

import asyncio
import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy import text

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 런타임에 한 번 임포트합니다.
from app.domains.site import models     # noqa
from app.domains.inq import models      # noqa
from app.domains.cms import models      # noqa

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    """sqlite(테스트/로컬)는 커넥션 풀 크기 옵션을 받지 않으므로 드라이버별로 분기합니다."""
    options = {"echo": settings.DEBUG_MODE, "future": True}
    if make_url(database_url).get_backend_name() != "sqlite":
        options.update(
            pool_recycle=3600,  # 1시간마다 연결 재활용
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
    return options


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),
    **_engine_options(settings.DATABASE_URL.get_secret_value()),
)

# 비동기 세션을 생성하는 '세션 공장'
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

metadata = SQLModel.metadata


# =============================================================================
# 시작 시 연결 대기 및 테이블 생성
# =============================================================================
async def wait_for_database(
    db_engine: Optional[AsyncEngine] = None,
    *,
    retries: Optional[int] = None,
    backoff_seconds: Optional[float] = None,
) -> None:
    """
    `SELECT 1`이 성공할 때까지 지수 백오프로 재시도합니다.
    재시도를 모두 소진하면 마지막 오류를 그대로 발생시킵니다.
    """
    db_engine = db_engine or engine
    retries = settings.DB_CONNECT_RETRIES if retries is None else retries
    delay = settings.DB_CONNECT_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds

    for attempt in range(1, retries + 1):
        try:
            async with db_engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("데이터베이스 연결 확인 완료 (시도 %d/%d)", attempt, retries)
            return
        except (SQLAlchemyError, OSError) as e:
            if attempt == retries:
                logger.error("데이터베이스 연결 실패, 재시도 소진: %s", e)
                raise
            logger.warning("데이터베이스 연결 실패 (시도 %d/%d), %.1f초 후 재시도: %s", attempt, retries, delay, e)
            await asyncio.sleep(delay)
            delay *= 2


async def create_db_and_tables(db_engine: Optional[AsyncEngine] = None) -> None:
    """
    등록된 모든 SQLModel 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
    """
    db_engine = db_engine or engine
    async with db_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 생성 완료 (또는 이미 존재)")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    ARQ Task, 시드 스크립트 등 요청 밖에서 사용할 수 있는
    독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
