# app/domains/auth/__init__.py

"""
FastAPI 애플리케이션의 'auth' 도메인 패키지입니다.

단일 관리자 계정(설정의 ADMIN_USERNAME / ADMIN_PASSWORD_HASH)으로 로그인하여
관리자 API에 사용할 Bearer 토큰을 발급받습니다.
"""

__title__ = "SHINHOTEK Admin Auth Domain"
__description__ = "Admin login and token issuing."
__version__ = "0.1.0"
__all__ = ["schemas", "services", "routers"]
