from typing import List

from fastapi import APIRouter

from healthapp.schemas import QuizQuestion, Recommendations
from healthapp.services.classification import QUIZ_QUESTIONS, Classification
from healthapp.services.recommendations import get_recommendations

# 인증 없이 읽을 수 있는 정적 콘텐츠
router = APIRouter(prefix="/api/content", tags=["content"])


@router.get("/quiz", response_model=List[QuizQuestion])
async def get_quiz():
    return QUIZ_QUESTIONS


@router.get("/recommendations/{classification}", response_model=Recommendations)
async def get_classification_recommendations(classification: Classification):
    return get_recommendations(classification)
