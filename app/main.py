# app/main.py

import logging
from pathlib import Path
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import API_PREFIX
from app.core.config import settings
from app.core.database import (
    create_db_and_tables,
    engine,
    get_async_session_context,
    get_session,
    wait_for_database,
)
from app.core.exceptions import (
    NotFoundError,
    PersistenceError,
    UnauthorizedError,
    UploadTooLargeError,
    ValidationError,
)
from app.core.security import TokenService
from app.core.seed import seed_database_if_needed

from app.domains.auth.routers import router as auth_router
from app.domains.site.routers import router as site_router, admin_router as site_admin_router
from app.domains.inq.routers import router as inq_router, admin_router as inq_admin_router
from app.domains.cms.routers import router as cms_router, admin_router as cms_admin_router
from app.domains.shared.routers import router as shared_router, admin_router as shared_admin_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    시작 시 DB 연결을 기다리고, 테이블 생성 및 기본 콘텐츠 시드를 수행합니다.
    종료 시 데이터베이스 연결 풀을 닫습니다.
    """
    logger.info("FastAPI 애플리케이션 시작 중... (env=%s)", settings.APP_ENV)
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)

    await wait_for_database()
    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
    if settings.SEED_ON_STARTUP:
        async with get_async_session_context() as db:
            await seed_database_if_needed(db)

    yield  # 애플리케이션 실행

    logger.info("FastAPI 애플리케이션 종료 중...")
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# 토큰 서비스는 설정값으로 한 번 생성하여 요청 간에 공유합니다.
app.state.token_service = TokenService.from_settings(settings)

# 업로드 파일은 정적 파일로 제공합니다. (디렉토리는 lifespan에서 생성)
app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -- 예외 핸들러 --
# 서비스 계층의 도메인 예외를 HTTP 상태 코드로 변환합니다.
@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    issues = [
        {
            "path": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid payload", "issues": issues})


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    status_code = (
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE if isinstance(exc, UploadTooLargeError)
        else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "issues": exc.issues})


@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(PersistenceError)
async def persistence_exception_handler(request: Request, exc: PersistenceError):
    logger.error("저장소 오류 (%s %s): %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Persistence error"})


@app.exception_handler(UnauthorizedError)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


# -- 도메인 라우터 포함 --
ADMIN_PREFIX = f"{API_PREFIX}/admin"

app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(site_router, prefix=API_PREFIX)
app.include_router(inq_router, prefix=API_PREFIX)
app.include_router(cms_router, prefix=API_PREFIX)
app.include_router(shared_router, prefix=API_PREFIX)
app.include_router(site_admin_router, prefix=ADMIN_PREFIX)
app.include_router(inq_admin_router, prefix=ADMIN_PREFIX)
app.include_router(cms_admin_router, prefix=ADMIN_PREFIX)
app.include_router(shared_admin_router, prefix=ADMIN_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스에 가벼운 쿼리를 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(text("SELECT 1"))
        if result.scalar_one_or_none() == 1:
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.exception("헬스 체크 중 데이터베이스 오류")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e.__class__.__name__}",
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query",
    )
