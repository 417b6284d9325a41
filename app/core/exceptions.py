# app/core/exceptions.py

"""
애플리케이션 공통 예외 계층입니다.

서비스 계층은 HTTPException 대신 아래 예외를 발생시키고,
main.py에 등록된 예외 핸들러가 HTTP 응답으로 변환합니다.

- ValidationError: 잘못된 입력 / 정책 위반 (400)
- UploadTooLargeError: 업로드 용량 초과 (413)
- NotFoundError: 대상 레코드 또는 싱글톤 없음 (404)
- PersistenceError: 저장소 작업 실패, 트랜잭션 롤백 포함 (500)
- UnauthorizedError: 토큰 누락/위조/만료 (401)
"""

from typing import List, Optional, TypedDict


class Issue(TypedDict):
    path: str
    message: str


class AppError(Exception):
    """모든 도메인 예외의 기본 클래스."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    def __init__(self, message: str = "Invalid payload", issues: Optional[List[Issue]] = None):
        super().__init__(message)
        self.issues: List[Issue] = list(issues or [])


class UploadTooLargeError(ValidationError):
    pass


class NotFoundError(AppError):
    pass


class PersistenceError(AppError):
    pass


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)
