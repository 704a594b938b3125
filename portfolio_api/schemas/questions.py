"""
질문 관련 스키마

응답은 status 기준 태그드 유니온:
- matched  → MatchedResponse  (answer + confidence)
- review   → ReviewResponse   (answer 없음, 어드바이저 검토 대기)
- no_match → NoMatchResponse  (fallback answer)
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field

from portfolio_api.schemas.answers import AnswerPayload
from portfolio_api.schemas.base import CamelModel

QuestionStatus = Literal["pending", "matched", "review", "no_match"]
Confidence = Literal["high", "medium", "low"]


class QuestionContext(CamelModel):
    """질문 시점의 화면 컨텍스트 (계좌 선택, 기간 등)"""
    accounts: Optional[List[str]] = None
    timeframe: Optional[str] = None
    selection_mode: Optional[Literal["accounts", "group"]] = None


class QuestionRequest(CamelModel):
    """질문 요청"""
    question: str = Field(..., description="사용자 질문", min_length=1)
    context: Optional[QuestionContext] = Field(None, description="계좌/기간 컨텍스트")
    placeholders: Optional[Dict[str, str]] = Field(
        None, description="질문 템플릿의 {name} 치환값 (예: {'benchmark': 'S&P 500'})"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "question": "What's the {timeframe} performance vs {benchmark}?",
                "context": {
                    "accounts": ["Growth Portfolio"],
                    "timeframe": "YTD",
                    "selectionMode": "accounts"
                },
                "placeholders": {"timeframe": "YTD", "benchmark": "S&P 500"}
            }
        },
    )


class Question(CamelModel):
    """저장된 질문 이력"""
    id: str
    question: str
    context: Optional[Dict[str, Any]] = None
    status: QuestionStatus = "pending"
    matched_answer_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MatchedResponse(CamelModel):
    """기존 답변과 매칭됨"""
    id: str = Field(..., description="질문 ID")
    status: Literal["matched"] = "matched"
    answer: AnswerPayload
    confidence: Confidence
    message: str


class ReviewResponse(CamelModel):
    """어드바이저 검토 대기열로 전달됨 (답변 없음)"""
    id: str = Field(..., description="질문 ID")
    status: Literal["review"] = "review"
    message: str


class NoMatchResponse(CamelModel):
    """매칭 실패 - 분류 결과 기반 fallback 답변"""
    id: str = Field(..., description="질문 ID")
    status: Literal["no_match"] = "no_match"
    answer: AnswerPayload
    message: str


QuestionResponse = Annotated[
    Union[MatchedResponse, ReviewResponse, NoMatchResponse],
    Field(discriminator="status"),
]
