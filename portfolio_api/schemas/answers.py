"""
답변 관련 스키마
"""
from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import ConfigDict, Field, StringConstraints

from portfolio_api.schemas.base import CamelModel

# 공백만 있는 값은 모든 질문에 부분 문자열로 걸리므로 거부
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
StrippedStr = Annotated[str, StringConstraints(strip_whitespace=True)]


class Answer(CamelModel):
    """저장된 답변 (기본 카탈로그 + 사용자 생성)"""
    id: str = Field(..., description="답변 고유 ID")
    title: str = Field(..., description="답변 제목 (예: YTD Performance vs S&P 500)")
    content: str = Field(..., description="답변 본문")
    category: Optional[str] = Field(None, description="카테고리 (예: Performance)")
    keywords: List[str] = Field(default_factory=list, description="매칭용 키워드")
    answer_type: Optional[str] = Field(None, description="UI 표시 타입 (예: performance)")
    data: Optional[Any] = Field(None, description="차트/표 렌더링용 구조화 데이터")
    is_active: bool = Field(default=True, description="False면 매칭/목록에서 제외")
    created_at: datetime
    updated_at: datetime


class AnswerPayload(CamelModel):
    """질문 응답에 포함되는 답변 (필요한 필드만)"""
    id: str
    title: str
    content: str
    category: Optional[str] = None
    answer_type: Optional[str] = None
    data: Optional[Any] = None

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerPayload":
        return cls(
            id=answer.id,
            title=answer.title,
            content=answer.content,
            category=answer.category,
            answer_type=answer.answer_type,
            data=answer.data,
        )


class AnswerCreate(CamelModel):
    """답변 생성 요청 (관리자용)"""
    title: NonBlankStr = Field(..., description="답변 제목")
    content: NonBlankStr = Field(..., description="답변 본문")
    category: Optional[StrippedStr] = None
    keywords: List[NonBlankStr] = Field(default_factory=list)
    answer_type: Optional[StrippedStr] = None
    data: Optional[Any] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Cash Position Overview",
                "content": "Cash and equivalents represent 3.1% of the portfolio.",
                "category": "Holdings",
                "keywords": ["cash", "liquidity", "money market"],
                "answerType": "holdings",
                "data": {"cashWeight": 3.1}
            }
        },
    )


class AnswerUpdate(CamelModel):
    """답변 수정 요청 (보낸 필드만 반영)"""
    title: Optional[NonBlankStr] = None
    content: Optional[NonBlankStr] = None
    category: Optional[StrippedStr] = None
    keywords: Optional[List[NonBlankStr]] = None
    answer_type: Optional[StrippedStr] = None
    data: Optional[Any] = None
    is_active: Optional[bool] = None
