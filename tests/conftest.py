# tests/conftest.py

import asyncio
import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from pydantic import SecretStr

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
# (app.core.database가 모든 도메인 모델을 임포트하므로 SQLModel.metadata에 전체 테이블이 등록됩니다.)
from app.main import app as main_app
from app.core import dependencies as deps
from app.core.config import settings
from app.core.database import get_session
from app.core.security import get_password_hash
from app.core.seed import seed_database_if_needed


# --- 테스트용 데이터베이스 설정 ---
# 실제 운영 DB와 분리된 테스트 전용 DB URL을 사용합니다. (기본: 로컬 sqlite 파일)
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///./test_shinhotek.db")
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,             # 테스트 시 SQL 쿼리 출력하지 않음
    future=True,
    poolclass=NullPool,     # 각 연결이 독립적으로 사용되고 바로 닫히도록 함
)

# 테스트용 세션 팩토리 생성 (AsyncSession)
TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

ADMIN_TEST_PASSWORD = "admin-test-pass123"


async def _reset_schema() -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)


async def _drop_schema() -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


# --- 데이터베이스 픽스처 ---
@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """
    테스트 세션 시작 시 모든 테이블을 삭제하고 재생성합니다.
    테스트 종료 시 다시 테이블을 삭제합니다.
    NullPool을 사용하므로 별도 이벤트 루프에서 실행해도 연결이 공유되지 않습니다.
    """
    asyncio.run(_reset_schema())
    yield  # 테스트 실행
    asyncio.run(_drop_schema())


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    각 테스트 함수마다 새 세션을 제공합니다.
    서비스 계층이 직접 커밋/롤백하므로 바깥 트랜잭션으로 감싸지 않고,
    테스트 종료 후 모든 테이블의 행을 삭제하여 테스트 간 격리를 보장합니다.
    """
    async with TestingSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        for table in reversed(SQLModel.metadata.sorted_tables):
            await conn.execute(table.delete())


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """업로드 파일이 실제 데이터 디렉토리에 쓰이지 않도록 테스트마다 임시 디렉토리를 사용합니다."""
    directory = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture(scope="session")
def admin_password_hash() -> str:
    """bcrypt 해싱은 느리므로 세션당 한 번만 계산합니다."""
    return get_password_hash(ADMIN_TEST_PASSWORD)


@pytest.fixture
def admin_credentials(monkeypatch, admin_password_hash: str) -> dict:
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", SecretStr(admin_password_hash))
    return {"username": settings.ADMIN_USERNAME, "password": ADMIN_TEST_PASSWORD}


@pytest_asyncio.fixture(scope="function")
async def seeded(db_session: AsyncSession) -> AsyncSession:
    """기본 콘텐츠(메인 페이지, 공개 설정, CMS 페이지)가 채워진 세션을 반환합니다."""
    await seed_database_if_needed(db_session)
    return db_session


# --- 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    테스트 세션을 사용하도록 의존성을 오버라이드한 비인증 AsyncClient를 반환합니다.
    """
    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides.update({
        get_session: override_get_session,
        deps.get_db_session: override_get_session,
    })

    transport = ASGITransport(app=main_app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as async_client:
            yield async_client
    finally:
        # 테스트가 끝난 후 원래 의존성 상태로 되돌립니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest_asyncio.fixture(scope="function")
async def admin_client(client: AsyncClient, admin_credentials: dict) -> AsyncClient:
    """
    /api/v1/auth/token 로그인 API를 실제로 호출하여 받은 토큰을
    Authorization 헤더에 포함한 클라이언트를 반환합니다.
    """
    res = await client.post("/api/v1/auth/token", data=admin_credentials)
    if res.status_code != 200:
        pytest.fail(f"Admin login failed: {res.text}")

    token = res.json()["access_token"]
    client.headers["Authorization"] = f"Bearer {token}"
    return client
