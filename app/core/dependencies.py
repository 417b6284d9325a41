# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 현재 인증된 관리자 확인 (get_current_admin).
"""

from typing import AsyncGenerator
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session as get_main_app_session
from app.core.security import get_current_admin  # noqa: F401


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    app.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session
