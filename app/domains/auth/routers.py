# app/domains/auth/routers.py

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from app.core import dependencies as deps
from app.core.config import settings
from app.core.security import TokenService, get_token_service
from . import schemas
from . import services as auth_services


router = APIRouter(
    tags=["Auth (관리자 인증)"],
    responses={401: {"description": "Unauthorized"}},
)


@router.post("/auth/token", response_model=schemas.Token, summary="관리자 로그인")
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    token_service: TokenService = Depends(get_token_service),
):
    """
    관리자 아이디/비밀번호를 확인하고 액세스 토큰을 발급합니다. (OAuth2 password flow)
    """
    access_token = auth_services.login_admin(settings, token_service, form_data.username, form_data.password)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/auth/me", response_model=schemas.AdminRead, summary="현재 관리자 확인")
async def read_current_admin(username: str = Depends(deps.get_current_admin)):
    return {"username": username}
