from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from healthapp.config import Settings, get_settings
from healthapp.db import get_db
from healthapp.schemas import AccountCredentials, LoginResponse, MessageResponse
from healthapp.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_user(user_in: AccountCredentials, db: AsyncSession = Depends(get_db)):
    await auth_service.register_account(db, user_in.email, user_in.password)
    return MessageResponse(message="User registered successfully!")


@router.post("/login", response_model=LoginResponse)
async def login_for_access_token(
    credentials: AccountCredentials,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    이메일/비밀번호로 로그인하고 24시간짜리 Bearer 토큰을 발급합니다.
    이메일이 없거나 비밀번호가 틀려도 같은 400 응답을 돌려줍니다.
    """
    account, token = await auth_service.login(db, settings, credentials.email, credentials.password)
    return LoginResponse(token=token, user_id=account.id)
