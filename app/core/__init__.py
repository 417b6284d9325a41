# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리, 시작 시 연결 대기 (SQLModel 및 AsyncSQLAlchemy).
- `crud_base.py`: 공통 CRUD 기본 클래스와 트랜잭션 헬퍼.
- `exceptions.py`: 도메인 예외 계층.
- `security.py`: 관리자 인증, 비밀번호 해싱, 토큰 발급/검증.
- `dependencies.py`: FastAPI 의존성 함수들.
- `tasks.py`: ARQ 워커용 공통 태스크.
"""

__title__ = "SHINHOTEK CMS Core"
__description__ = "Core components for the SHINHOTEK homepage CMS API."
__version__ = "0.1.0"
__all__ = []
