import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Header
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from healthapp.config import Settings, get_settings
from healthapp.errors import (
    ValidationError, ConflictError, InvalidCredentialsError,
    MissingCredentialError, InvalidCredentialError,
)
from healthapp.models import Account
from healthapp.schemas import TokenClaims

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password, password_hash):
    return pwd_context.verify(plain_password, password_hash)


def hash_password(password):
    if not isinstance(password, (str, bytes)):
        raise TypeError("Password must be a string or bytes.")
    return pwd_context.hash(password)


def create_access_token(account: Account, settings: Settings, now: Optional[datetime] = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": str(account.id),
        "email": account.email,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_access_token(token: Optional[str], settings: Settings, now: Optional[datetime] = None) -> TokenClaims:
    """
    토큰 서명과 만료만 확인하는 순수 함수 (DB 조회 없음).

    - 토큰이 없으면 MissingCredentialError (401)
    - 서명 불일치 / 형식 오류 / 만료면 InvalidCredentialError (403)
    """
    if not token:
        raise MissingCredentialError()

    try:
        # 만료는 아래에서 now 기준으로 직접 확인
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"verify_exp": False},
        )
    except JWTError:
        raise InvalidCredentialError()

    sub = payload.get("sub")
    email = payload.get("email")
    iat = payload.get("iat")
    exp = payload.get("exp")
    if sub is None or not isinstance(email, str) or iat is None or exp is None:
        raise InvalidCredentialError()

    try:
        account_id = int(sub)
        issued_at = datetime.fromtimestamp(int(iat), tz=timezone.utc)
        expires_at = datetime.fromtimestamp(int(exp), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        raise InvalidCredentialError()

    current = now or datetime.now(timezone.utc)
    if current >= expires_at:
        raise InvalidCredentialError()

    return TokenClaims(
        account_id=account_id,
        email=email,
        issued_at=issued_at,
        expires_at=expires_at,
    )


async def get_account_by_email(db: AsyncSession, email: str) -> Optional[Account]:
    res = await db.execute(select(Account).where(Account.email == email))
    return res.scalar_one_or_none()


async def register_account(db: AsyncSession, email: Optional[str], password: Optional[str]) -> Account:
    """
    계정 + 빈 프로필을 한 번에 생성합니다.
    이메일 중복은 사전 조회 없이 DB unique 제약 위반으로만 판단합니다.
    """
    if not email or not password:
        raise ValidationError("Email and password are required.")

    account = Account(
        email=email,
        password_hash=hash_password(password),
        personal={},
        health={},
        classification=None,
    )
    db.add(account)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("Registration rejected: duplicate email")
        raise ConflictError()

    logger.info("Registered account id=%s", account.id)
    return account


async def authenticate(db: AsyncSession, email: Optional[str], password: Optional[str]) -> Account:
    account = await get_account_by_email(db, email) if email else None

    if account is None:
        # 존재하지 않는 이메일도 같은 비용의 해시 검증을 거치게 함
        pwd_context.dummy_verify()
        raise InvalidCredentialsError()

    if not password or not verify_password(password, account.password_hash):
        raise InvalidCredentialsError()

    return account


async def login(db: AsyncSession, settings: Settings, email: Optional[str], password: Optional[str]):
    account = await authenticate(db, email, password)
    token = create_access_token(account, settings)
    logger.info("Issued access token for account id=%s", account.id)
    return account, token


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Authorization 헤더에서 토큰을 꺼냅니다.

    - 헤더가 없거나 비었거나 "Bearer" 뒤에 토큰이 없으면 None (401)
    - Bearer 가 아닌 스킴이면 토큰은 있으나 잘못된 것으로 보고 InvalidCredentialError (403)
    """
    if not authorization or not authorization.strip():
        return None
    parts = authorization.strip().split(None, 1)
    if len(parts) < 2:
        return None
    scheme, token = parts
    if scheme.lower() != "bearer":
        raise InvalidCredentialError()
    return token.strip() or None


def get_current_claims(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """
    보호된 라우터의 의존성. Authorization: Bearer <token> 헤더를 검증합니다.
    """
    try:
        token = extract_bearer_token(authorization)
        return verify_access_token(token, settings)
    except MissingCredentialError:
        logger.info("Request without bearer token rejected")
        raise
    except InvalidCredentialError:
        logger.warning("Request with invalid or expired bearer token rejected")
        raise
