# app/domains/auth/services.py

import hmac
import logging

from app.core.config import Settings
from app.core.exceptions import UnauthorizedError
from app.core.security import TokenService, verify_password

logger = logging.getLogger(__name__)


def authenticate_admin(settings: Settings, username: str, password: str) -> bool:
    """
    관리자 아이디와 비밀번호를 확인합니다. 해시가 설정되지 않았으면 항상 실패합니다.
    """
    username_ok = hmac.compare_digest(username.encode(), settings.ADMIN_USERNAME.encode())
    password_ok = verify_password(password, settings.ADMIN_PASSWORD_HASH.get_secret_value())
    return username_ok and password_ok


def login_admin(settings: Settings, token_service: TokenService, username: str, password: str) -> str:
    if not authenticate_admin(settings, username, password):
        logger.warning("관리자 로그인 실패: username=%s", username)
        raise UnauthorizedError("Incorrect username or password")
    logger.info("관리자 로그인: username=%s", username)
    return token_service.issue_token(username)
