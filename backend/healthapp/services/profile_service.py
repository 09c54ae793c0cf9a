import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from healthapp.errors import NotFoundError, ValidationError
from healthapp.models import Account, Followup
from healthapp.schemas import PersonalDetails, HealthDetails, ProfileOut, FollowupOut
from healthapp.services.classification import parse_classification

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _get_account(db: AsyncSession, account_id: int) -> Account:
    account = await db.get(Account, account_id)
    if account is None:
        raise NotFoundError()
    return account


async def _load_followups(db: AsyncSession, account_id: int) -> List[Followup]:
    # 저장 순서와 무관하게 조회 시점에 최신순 정렬 (동시각이면 id 역순)
    q = (
        select(Followup)
        .where(Followup.account_id == account_id)
        .order_by(desc(Followup.timestamp), desc(Followup.id))
    )
    return list((await db.execute(q)).scalars().all())


async def _to_profile(db: AsyncSession, account: Account) -> ProfileOut:
    followups = await _load_followups(db, account.id)
    return ProfileOut(
        id=account.id,
        email=account.email,
        personal=account.personal or {},
        health=account.health or {},
        classification=account.classification,
        last_updated=account.last_updated,
        followups=[FollowupOut.model_validate(f) for f in followups],
    )


async def get_profile(db: AsyncSession, account_id: int) -> ProfileOut:
    account = await _get_account(db, account_id)
    return await _to_profile(db, account)


async def update_profile(
    db: AsyncSession,
    account_id: int,
    personal: Optional[PersonalDetails],
    health: Optional[HealthDetails],
    now: Optional[datetime] = None,
) -> ProfileOut:
    """
    personal / health 를 통째로 교체합니다 (병합 아님).
    요청에서 빠진 하위 구조나 필드는 사라집니다.
    """
    account = await _get_account(db, account_id)

    account.personal = personal.model_dump(exclude_none=True) if personal else {}
    account.health = health.model_dump(exclude_none=True) if health else {}
    account.last_updated = now or _utcnow()

    await db.commit()
    logger.info("Profile updated for account id=%s", account_id)
    return await _to_profile(db, account)


async def set_classification(db: AsyncSession, account_id: int, value) -> ProfileOut:
    # 허용값 검사는 어떤 조회/쓰기보다 먼저
    classification = parse_classification(value)

    account = await _get_account(db, account_id)
    account.classification = classification.value
    await db.commit()
    logger.info("Classification set to %s for account id=%s", classification.value, account_id)
    return await _to_profile(db, account)


async def list_followups(db: AsyncSession, account_id: int) -> List[FollowupOut]:
    await _get_account(db, account_id)
    return [FollowupOut.model_validate(f) for f in await _load_followups(db, account_id)]


async def add_followup(
    db: AsyncSession,
    account_id: int,
    text: Optional[str],
    now: Optional[datetime] = None,
) -> FollowupOut:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Feedback text is required.")

    await _get_account(db, account_id)

    followup = Followup(account_id=account_id, text=text, timestamp=now or _utcnow())
    db.add(followup)
    await db.commit()
    logger.info("Follow-up %s added for account id=%s", followup.id, account_id)
    return FollowupOut.model_validate(followup)
