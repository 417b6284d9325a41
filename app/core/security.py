# app/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증 (passlib/bcrypt).
- JWT(JSON Web Token) 발급 및 검증 (TokenService).
- OAuth2 Password Bearer 스키마를 사용하여 현재 관리자 확인.

TokenService는 설정값으로 명시적으로 생성되어 app.state에 보관됩니다.
모듈 전역의 비밀 키를 직접 참조하지 않습니다.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from app import API_PREFIX
from app.core.config import Settings
from app.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교합니다.
    해시가 비어 있거나 형식이 잘못된 경우 False를 반환합니다.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("관리자 비밀번호 해시 형식이 올바르지 않습니다.")
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# --- OAuth2 스키마 설정 ---
# auto_error=False: 토큰 누락도 UnauthorizedError로 통일하여 401을 반환합니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/auth/token", auto_error=False)


class TokenService:
    """
    관리자 액세스 토큰을 발급하고 검증합니다.
    서명 키 / 알고리즘 / 만료 시간은 생성 시점에 주입됩니다.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_minutes: int = 480):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
            expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def issue_token(self, identity: str, expires_delta: Optional[timedelta] = None) -> str:
        """`sub`에 식별자를 담은 서명된 토큰을 발급합니다."""
        expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else self.expires_delta)
        to_encode = {"sub": identity, "exp": expire}
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Optional[str]:
        """
        토큰의 서명과 만료를 검증하고 식별자를 반환합니다.
        만료, 위조, 형식 오류인 경우 None을 반환합니다.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.info("토큰 검증 실패: %s", e)
            return None
        identity = payload.get("sub")
        if not isinstance(identity, str) or not identity:
            return None
        return identity


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_admin(
    token: Optional[str] = Depends(oauth2_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> str:
    """
    Authorization 헤더의 Bearer 토큰을 검증하고 관리자 식별자를 반환합니다.
    검증에 실패하면 UnauthorizedError(401)를 발생시키며, 엔드포인트 본문은 실행되지 않습니다.
    """
    if not token:
        raise UnauthorizedError("Not authenticated")
    identity = token_service.verify_token(token)
    if identity is None:
        raise UnauthorizedError()
    return identity
