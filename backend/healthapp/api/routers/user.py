from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from healthapp.db import get_db
from healthapp.schemas import (
    TokenClaims, ProfileOut, ProfileUpdate, ProfileEnvelope,
    ClassificationUpdate, FollowupCreate, FollowupOut, MyRecommendations,
)
from healthapp.services import profile_service
from healthapp.services.auth_service import get_current_claims
from healthapp.services.classification import Classification
from healthapp.services.recommendations import get_recommendations

# user 라우터 정의: 모든 엔드포인트는 토큰의 account_id 본인 데이터만 다룸
router = APIRouter(prefix="/api/user", tags=["user"])


# [1] 프로필 조회
@router.get("/profile", response_model=ProfileOut)
async def get_user_profile(
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return await profile_service.get_profile(db, claims.account_id)


# [2] 프로필 업데이트 (personal / health 전체 교체)
@router.post("/profile", response_model=ProfileEnvelope)
@router.put("/profile", response_model=ProfileEnvelope)
async def update_user_profile(
    profile_in: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    profile = await profile_service.update_profile(
        db, claims.account_id, profile_in.personal, profile_in.health
    )
    return ProfileEnvelope(message="Profile updated successfully!", user=profile)


# [3] 체질 분석 결과 저장
@router.post("/analysis", response_model=ProfileEnvelope)
async def save_analysis(
    req: ClassificationUpdate,
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    profile = await profile_service.set_classification(db, claims.account_id, req.classification)
    return ProfileEnvelope(message="Analysis saved!", user=profile)


# [4] 후속 기록 목록 (최신순)
@router.get("/followups", response_model=List[FollowupOut])
async def get_followups(
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return await profile_service.list_followups(db, claims.account_id)


# [5] 후속 기록 추가 (생성된 항목만 반환)
@router.post("/followups", response_model=FollowupOut, status_code=status.HTTP_201_CREATED)
async def add_followup(
    req: FollowupCreate,
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    return await profile_service.add_followup(db, claims.account_id, req.text)


# [6] 내 체질에 맞는 식단/일과
@router.get("/recommendations", response_model=MyRecommendations)
async def get_my_recommendations(
    db: AsyncSession = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    저장된 분석 결과가 없으면 recommendations 는 null 입니다 (퀴즈 먼저).
    """
    profile = await profile_service.get_profile(db, claims.account_id)
    if profile.classification is None:
        return MyRecommendations(classification=None, recommendations=None)
    content = get_recommendations(Classification(profile.classification))
    return MyRecommendations(classification=profile.classification, recommendations=content)
