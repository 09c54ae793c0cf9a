from __future__ import annotations
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field, AliasChoices, ConfigDict, field_validator
from datetime import datetime

Number = Union[int, float]


def _blank_to_none(value):
    # 폼에서 비워 둔 칸은 "" 로 들어옴 -> 값 없음으로 처리
    if isinstance(value, str) and not value.strip():
        return None
    return value


# --- 인증 ---
class AccountCredentials(BaseModel):
    """
    /api/auth/register, /api/auth/login 요청 스키마.
    빈 값 검사는 서비스 계층에서 합니다 (누락/빈 문자열 모두 400).
    """
    email: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str = "Login successful!"
    token: str
    user_id: int = Field(alias="userId")
    token_type: str = Field("bearer", alias="tokenType")

    model_config = ConfigDict(populate_by_name=True)


class TokenClaims(BaseModel):
    """검증된 토큰에서 꺼낸 신원 정보."""
    account_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


# --- 프로필 ---
class PersonalDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    age: Optional[Number] = None

    @field_validator("name", "age", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return _blank_to_none(value)


class HealthDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    height: Optional[Number] = None
    weight: Optional[Number] = None
    conditions: Optional[str] = None

    @field_validator("height", "weight", "conditions", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return _blank_to_none(value)


class ProfileUpdate(BaseModel):
    """
    /api/user/profile 업데이트 요청 스키마.
    personal / health 는 병합이 아니라 통째로 교체됩니다. 빠진 쪽은 {} 가 됩니다.
    """
    personal: Optional[PersonalDetails] = None
    health: Optional[HealthDetails] = None


class ClassificationUpdate(BaseModel):
    classification: Optional[Any] = Field(
        None, validation_alias=AliasChoices("analysisResult", "classification")
    )


class FollowupCreate(BaseModel):
    text: Optional[str] = None


class FollowupOut(BaseModel):
    id: int
    text: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class ProfileOut(BaseModel):
    """
    프로필 응답 스키마. password_hash 는 절대 포함하지 않습니다.
    """
    id: int
    email: str
    personal: Dict[str, Any] = Field(default_factory=dict)
    health: Dict[str, Any] = Field(default_factory=dict)
    classification: Optional[str] = Field(None, alias="analysisResult")
    last_updated: Optional[datetime] = Field(None, alias="lastUpdated")
    followups: List[FollowupOut] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ProfileEnvelope(BaseModel):
    message: str
    user: ProfileOut


# --- 콘텐츠 ---
class QuizOption(BaseModel):
    text: str
    value: str


class QuizQuestion(BaseModel):
    question: str
    options: List[QuizOption]


class ContentItem(BaseModel):
    label: str
    text: str


class ContentSection(BaseModel):
    title: str
    summary: str
    items: List[ContentItem]


class Recommendations(BaseModel):
    classification: str
    diet: ContentSection
    routine: ContentSection


class MyRecommendations(BaseModel):
    classification: Optional[str] = Field(None, alias="analysisResult")
    recommendations: Optional[Recommendations] = None

    model_config = ConfigDict(populate_by_name=True)
